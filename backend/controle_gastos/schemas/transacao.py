"""
Transaction schemas.
"""

from pydantic import BaseModel, field_validator
from typing import Any, List
from datetime import date, datetime
from decimal import Decimal

from controle_gastos.models.transacao import TipoTransacao


class TransacaoBase(BaseModel):
    descricao: str
    tipo: TipoTransacao
    valor: Decimal
    data: date
    categoria: str


class TransacaoCreate(TransacaoBase):
    """
    Payload for creating or replacing a transaction.
    Also used to validate each record of a JSON import, so unknown keys
    (id, usuario_id from an export) are ignored.
    """

    @field_validator("descricao", "categoria")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("data", mode="before")
    @classmethod
    def strip_time(cls, value: Any) -> Any:
        # Native date pickers may send a full ISO date-time
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return value.split("T")[0]
        return value


class TransacaoResponse(TransacaoBase):
    id: int
    usuario_id: int

    class Config:
        from_attributes = True


class TransacaoCreated(BaseModel):
    id: int


class BulkDeleteRequest(BaseModel):
    # Raw values; non-numeric entries are dropped by the service
    ids: List[Any]


class BulkDeleteResponse(BaseModel):
    deletadas: int
