"""
Password hashing, token issuance and login.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt
from sqlalchemy.orm import Session

from controle_gastos.config import settings
from controle_gastos.models.usuario import Usuario

logger = logging.getLogger(__name__)


class InvalidCredentialsError(Exception):
    """Unknown email or wrong password."""


def hash_password(senha: str) -> str:
    return bcrypt.hashpw(senha.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(senha: str, senha_hash: str) -> bool:
    """Constant-time bcrypt comparison."""
    try:
        return bcrypt.checkpw(senha.encode("utf-8"), senha_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Stored password hash has an invalid format")
        return False


def create_access_token(usuario: Usuario) -> str:
    """Sign a token carrying the user id and email, valid for jwt_expire_minutes."""
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expire_minutes)
    payload = {
        "id": usuario.id,
        "email": usuario.email,
        "exp": expires,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry.
    Raises jwt.InvalidTokenError (ExpiredSignatureError included) when the
    token cannot be trusted.
    """
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    if not isinstance(payload.get("id"), int):
        raise jwt.InvalidTokenError("Token has no user id")
    return payload


def authenticate(db: Session, email: str, senha: str) -> str:
    """Check the credentials and return a fresh access token."""
    usuario = db.query(Usuario).filter(Usuario.email == email).first()
    if not usuario or not verify_password(senha, usuario.senha):
        logger.debug(f"Failed login for {email[:64]!r}")
        raise InvalidCredentialsError("Invalid email or password")

    logger.info(f"Usuario {usuario.id} logged in")
    return create_access_token(usuario)


def create_usuario(db: Session, email: str, senha: str) -> Usuario:
    """Register a user with a hashed password."""
    if db.query(Usuario).filter(Usuario.email == email).first():
        raise ValueError(f"Email already registered: {email}")

    usuario = Usuario(email=email, senha=hash_password(senha))
    db.add(usuario)
    db.commit()
    db.refresh(usuario)
    return usuario
