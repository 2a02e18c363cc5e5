"""
Request and response schemas for the companion server.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ForgotPasswordForm(BaseModel):
    email: str = Field(..., description="Address the reset link is sent to")


class ResetPasswordForm(BaseModel):
    token: Optional[str] = Field(default=None, description="Token from the reset email link")
    password: str = Field(..., description="New password")
    confirm_password: str = Field(..., alias="confirmPassword", description="Repeated new password")

    model_config = {"populate_by_name": True}


class FlowResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    redirect_to: Optional[str] = None
    user: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    error: str
