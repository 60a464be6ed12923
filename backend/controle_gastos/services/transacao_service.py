"""
Owner-scoped store access for transactions.

Every function takes the authenticated user's id and filters on it, so a
caller can never read or change another user's rows. Each operation commits
on its own; nothing spans several statements.
"""

import logging
from typing import Any, Iterable, List

from sqlalchemy.orm import Session

from controle_gastos.models.transacao import Transacao
from controle_gastos.schemas.transacao import TransacaoCreate

logger = logging.getLogger(__name__)

# Largest value a signed 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1


class TransacaoNotFoundError(LookupError):
    """Transaction does not exist or belongs to another user."""


def is_valid_id(transacao_id: int) -> bool:
    return 0 < transacao_id <= MAX_ID


def create_transacao(db: Session, usuario_id: int, dados: TransacaoCreate) -> int:
    """Insert a transaction for the user and return its new id."""
    transacao = Transacao(
        descricao=dados.descricao,
        tipo=dados.tipo,
        valor=dados.valor,
        data=dados.data,
        categoria=dados.categoria,
        usuario_id=usuario_id,
    )
    db.add(transacao)
    db.commit()
    db.refresh(transacao)
    return transacao.id


def list_transacoes(db: Session, usuario_id: int) -> List[Transacao]:
    """All transactions of the user, newest first."""
    return (
        db.query(Transacao)
        .filter(Transacao.usuario_id == usuario_id)
        .order_by(Transacao.data.desc(), Transacao.id.desc())
        .all()
    )


def get_transacao(db: Session, usuario_id: int, transacao_id: int) -> Transacao:
    if not is_valid_id(transacao_id):
        raise TransacaoNotFoundError(f"Transacao {transacao_id} not found")

    transacao = db.query(Transacao).filter(
        Transacao.id == transacao_id,
        Transacao.usuario_id == usuario_id
    ).first()
    if not transacao:
        raise TransacaoNotFoundError(f"Transacao {transacao_id} not found")
    return transacao


def update_transacao(
    db: Session,
    usuario_id: int,
    transacao_id: int,
    dados: TransacaoCreate
) -> Transacao:
    """Replace the editable fields. id and usuario_id never change."""
    transacao = get_transacao(db, usuario_id, transacao_id)

    for field, value in dados.model_dump().items():
        setattr(transacao, field, value)

    db.commit()
    db.refresh(transacao)
    return transacao


def delete_transacao(db: Session, usuario_id: int, transacao_id: int) -> None:
    if not is_valid_id(transacao_id):
        raise TransacaoNotFoundError(f"Transacao {transacao_id} not found")

    deleted = db.query(Transacao).filter(
        Transacao.id == transacao_id,
        Transacao.usuario_id == usuario_id
    ).delete(synchronize_session=False)
    db.commit()

    if deleted == 0:
        raise TransacaoNotFoundError(f"Transacao {transacao_id} not found")


def sanitize_ids(raw_ids: Iterable[Any]) -> List[int]:
    """
    Keep only positive ids that fit the id column, given as integers or
    strings of digits.
    Duplicates are dropped, first occurrence order is kept.
    """
    ids: List[int] = []
    for value in raw_ids:
        if isinstance(value, bool):
            continue
        if isinstance(value, int):
            parsed = value
        elif isinstance(value, str) and value.strip().isdecimal():
            parsed = int(value.strip())
        else:
            continue
        if not is_valid_id(parsed):
            continue
        if parsed not in ids:
            ids.append(parsed)
    return ids


def delete_transacoes(db: Session, usuario_id: int, ids: List[int]) -> int:
    """
    Delete the given ids that belong to the user in one statement.
    Ids owned by someone else (or missing) are ignored and not counted.
    """
    if not ids:
        return 0

    deleted = db.query(Transacao).filter(
        Transacao.id.in_(ids),
        Transacao.usuario_id == usuario_id
    ).delete(synchronize_session=False)
    db.commit()

    logger.info(f"Bulk delete for usuario {usuario_id}: {deleted} of {len(ids)} ids removed")
    return deleted
