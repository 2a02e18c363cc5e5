"""
Password Recovery Endpoints.

JSON counterparts of the "forgot password" and "reset password" pages. Input is
validated here before being forwarded to the booking backend; validation and
upstream failures are answered as ``{"error": "..."}`` by the exception handlers.
"""

from typing import Any, Dict

from fastapi import APIRouter

from lesage_booking.auth.password import ForgotPasswordFlow, ResetPasswordFlow
from lesage_booking.server.schemas import (
    ErrorResponse,
    FlowResponse,
    ForgotPasswordForm,
    ResetPasswordForm,
)
from lesage_booking.server.services.deps import AuthConfigDep, BookingClientDep

router = APIRouter()


@router.post(
    "/forgot-password",
    response_model=FlowResponse,
    summary="Request Password Reset",
    description="Send a password reset link to the given address.",
    responses={400: {"model": ErrorResponse, "description": "Invalid email or backend refusal"}},
)
def forgot_password(form: ForgotPasswordForm, client: BookingClientDep) -> FlowResponse:
    """
    Request a reset link.

    The answer is the same whether or not an account exists for the address.
    """
    result = ForgotPasswordFlow(client).submit(form.email)
    return FlowResponse(**result.model_dump())


@router.post(
    "/reset-password",
    response_model=FlowResponse,
    summary="Reset Password",
    description="Set a new password using the token received by email.",
    responses={400: {"model": ErrorResponse, "description": "Missing token, weak or mismatched password"}},
)
def reset_password(form: ResetPasswordForm, client: BookingClientDep) -> FlowResponse:
    result = ResetPasswordFlow(client).submit(form.token, form.password, form.confirm_password)
    return FlowResponse(**result.model_dump())


@router.get(
    "/config",
    summary="Public Auth Configuration",
    description="Sign-in options the frontend should offer (no secrets).",
)
async def auth_config(config: AuthConfigDep) -> Dict[str, Any]:
    return config.public_view()
