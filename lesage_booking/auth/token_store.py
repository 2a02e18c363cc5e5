"""Bearer token storage.

The backend issues a JWT on login/register/refresh. Clients keep it in a small
key/value store under ``authToken`` so later calls (and later processes, for the
file store) can attach it. ``auth_token`` is the key older frontends wrote and
is still honored on read.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

TOKEN_KEY = "authToken"
LEGACY_TOKEN_KEY = "auth_token"

logger = logging.getLogger(__name__)


class TokenStore(ABC):
    """Persistence for the backend bearer token."""

    @abstractmethod
    def _read(self) -> Dict[str, str]:
        ...

    @abstractmethod
    def _write(self, data: Dict[str, str]) -> None:
        ...

    def get(self) -> Optional[str]:
        """Return the stored token, falling back to the legacy key."""
        data = self._read()
        return data.get(TOKEN_KEY) or data.get(LEGACY_TOKEN_KEY) or None

    def set(self, token: str) -> None:
        data = self._read()
        data[TOKEN_KEY] = token
        self._write(data)
        logger.info("Token saved")

    def remove(self) -> None:
        data = self._read()
        data.pop(TOKEN_KEY, None)
        data.pop(LEGACY_TOKEN_KEY, None)
        self._write(data)
        logger.info("Token removed")


class MemoryTokenStore(TokenStore):
    """Process-local store; the default for library use and tests."""

    def __init__(self, token: Optional[str] = None) -> None:
        self._data: Dict[str, str] = {}
        if token:
            self._data[TOKEN_KEY] = token

    def _read(self) -> Dict[str, str]:
        return dict(self._data)

    def _write(self, data: Dict[str, str]) -> None:
        self._data = dict(data)


class FileTokenStore(TokenStore):
    """JSON file store that survives restarts, like browser local storage.

    The file is created on first write. A missing or unreadable file reads as
    empty.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            logger.warning("FileTokenStore: ignoring unreadable %s: %s", self.path, e)
            return {}
        if not isinstance(raw, dict):
            return {}
        return {str(k): str(v) for k, v in raw.items() if v is not None}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")
