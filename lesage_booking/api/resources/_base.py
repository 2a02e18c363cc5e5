from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..base import BaseApiClient


class Resource:
    """A group of endpoints sharing the client's request core."""

    def __init__(self, api: "BaseApiClient") -> None:
        self._api = api
