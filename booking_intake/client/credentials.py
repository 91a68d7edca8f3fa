"""
Bearer-token providers for the booking client.

The client never reads session storage itself; it asks an injected
provider for the current token on every request.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class CredentialProvider(ABC):
    @abstractmethod
    def current_token(self) -> Optional[str]:
        """Return the bearer token to send, or None to send no Authorization header."""
        raise NotImplementedError


class StaticCredentialProvider(CredentialProvider):
    """Provider holding a fixed token (or none)."""

    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token

    def current_token(self) -> Optional[str]:
        return self._token or None


class SessionFileCredentialProvider(CredentialProvider):
    """
    Reads the token from a persisted session file.

    The file is a JSON object of storage keys. The entry under
    ``storage_key`` holds the signed-in user's info, either as an object or
    as a JSON-encoded string, with the token under ``"token"``. A missing,
    unreadable or malformed session simply yields no token.
    """

    def __init__(self, session_file: Union[str, Path], storage_key: str = "userInfo") -> None:
        self._path = Path(session_file)
        self._storage_key = storage_key

    def _load_user_info(self) -> Optional[dict[str, Any]]:
        if not self._path.exists():
            return None
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                stored = json.load(f)
            user_info = stored.get(self._storage_key) if isinstance(stored, dict) else None
            if isinstance(user_info, str):
                user_info = json.loads(user_info)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self._path, e)
            return None
        return user_info if isinstance(user_info, dict) else None

    def current_token(self) -> Optional[str]:
        user_info = self._load_user_info()
        if not user_info:
            return None
        token = user_info.get("token")
        return token if isinstance(token, str) and token else None
