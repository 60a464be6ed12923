"""
Pydantic schemas package.
"""

from controle_gastos.schemas.auth import LoginRequest, TokenResponse
from controle_gastos.schemas.filtro import Periodo, FiltroTransacoes
from controle_gastos.schemas.import_file import ImportErro, ImportReport
from controle_gastos.schemas.resumo import Resumo, CategoriaTotal, ResumoResponse
from controle_gastos.schemas.transacao import (
    TransacaoBase,
    TransacaoCreate,
    TransacaoResponse,
    TransacaoCreated,
    BulkDeleteRequest,
    BulkDeleteResponse,
)

__all__ = [
    "LoginRequest",
    "TokenResponse",
    "Periodo",
    "FiltroTransacoes",
    "ImportErro",
    "ImportReport",
    "Resumo",
    "CategoriaTotal",
    "ResumoResponse",
    "TransacaoBase",
    "TransacaoCreate",
    "TransacaoResponse",
    "TransacaoCreated",
    "BulkDeleteRequest",
    "BulkDeleteResponse",
]
