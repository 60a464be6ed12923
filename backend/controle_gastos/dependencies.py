"""
FastAPI dependencies.
"""

from typing import Optional

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from controle_gastos.database import get_db
from controle_gastos.services import auth_service

__all__ = ["get_db", "get_current_usuario_id"]

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_usuario_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> int:
    """
    Resolve the bearer token to a user id.
    401 when no token is sent, 403 when it is invalid or expired.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=401,
            detail="Token não informado",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = auth_service.decode_access_token(credentials.credentials)
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=403, detail="Token inválido ou expirado")

    return payload["id"]
