"""
Logged-in identity kept across runs.
"""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Holds the bearer token with an explicit load/save/clear lifecycle.

    With a path the token is persisted as a small JSON file, otherwise it
    only lives in memory.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else None
        self._token: Optional[str] = None

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def load(self) -> Optional[str]:
        """Read the token saved by a previous run, if any."""
        if self.path is None or not self.path.exists():
            return self._token

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return None

        token = data.get("token") if isinstance(data, dict) else None
        self._token = token if isinstance(token, str) and token else None
        return self._token

    def save(self, token: str) -> None:
        self._token = token
        if self.path is not None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"token": token}), encoding="utf-8")

    def clear(self) -> None:
        self._token = None
        if self.path is not None and self.path.exists():
            self.path.unlink()

    def auth_headers(self) -> dict:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
