"""
HTTP client for the transactions API.
"""

import logging
from typing import Any, List, Optional

import httpx

from controle_gastos.client.session import SessionStore
from controle_gastos.schemas.import_file import ImportReport
from controle_gastos.schemas.transacao import TransacaoCreate, TransacaoResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-successful API response."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class NotAuthenticatedError(ApiError):
    """No token was sent: the user has to log in."""


class SessionExpiredError(ApiError):
    """The token was rejected: the user has to log in again."""


class ApiClient:
    """
    Thin wrapper around an httpx.Client.

    Each method performs exactly one request and either returns the decoded
    result or raises an ApiError subclass.
    """

    def __init__(self, http: httpx.Client, session: SessionStore, prefix: str = "/api"):
        self.http = http
        self.session = session
        self.prefix = prefix.rstrip("/")

    def _request(self, method: str, path: str, json: Optional[Any] = None) -> httpx.Response:
        response = self.http.request(
            method,
            f"{self.prefix}{path}",
            json=json,
            headers=self.session.auth_headers(),
        )
        if response.is_success:
            return response

        try:
            body = response.json()
        except ValueError:
            body = None
        detail = body.get("detail", response.text) if isinstance(body, dict) else response.text
        logger.debug(f"{method} {path} failed with {response.status_code}: {detail}")

        if response.status_code == 401:
            raise NotAuthenticatedError(401, str(detail))
        if response.status_code == 403:
            raise SessionExpiredError(403, str(detail))
        raise ApiError(response.status_code, str(detail))

    def login(self, email: str, senha: str) -> str:
        response = self._request("POST", "/login", json={"email": email, "senha": senha})
        token = response.json()["token"]
        self.session.save(token)
        return token

    def logout(self) -> None:
        self.session.clear()

    def list_transacoes(self) -> List[TransacaoResponse]:
        response = self._request("GET", "/transacoes")
        return [TransacaoResponse.model_validate(item) for item in response.json()]

    def create_transacao(self, dados: TransacaoCreate) -> int:
        response = self._request("POST", "/transacoes", json=dados.model_dump(mode="json"))
        return response.json()["id"]

    def update_transacao(self, transacao_id: int, dados: TransacaoCreate) -> None:
        self._request("PUT", f"/transacoes/{transacao_id}", json=dados.model_dump(mode="json"))

    def delete_transacao(self, transacao_id: int) -> None:
        self._request("DELETE", f"/transacoes/{transacao_id}")

    def delete_transacoes(self, ids: List[int]) -> int:
        """Bulk delete; returns how many rows the server removed."""
        response = self._request("DELETE", "/transacoes", json={"ids": list(ids)})
        return response.json()["deletadas"]

    def import_transacoes(self, registros: List[Any]) -> ImportReport:
        """Server-side import of a whole array in one request."""
        response = self._request("POST", "/transacoes/importar", json=registros)
        return ImportReport.model_validate(response.json())
