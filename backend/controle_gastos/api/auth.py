"""
Login endpoint.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from controle_gastos.dependencies import get_db
from controle_gastos.schemas.auth import LoginRequest, TokenResponse
from controle_gastos.services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db)
):
    """Exchange email and password for a one-hour bearer token."""
    try:
        token = auth_service.authenticate(db, credentials.email, credentials.senha)
    except auth_service.InvalidCredentialsError:
        raise HTTPException(status_code=401, detail="Dados inválidos")
    except SQLAlchemyError:
        logger.exception("Login query failed")
        raise HTTPException(status_code=500, detail="Erro no servidor")

    return TokenResponse(token=token)
