"""
Filter specification for the transaction list.
"""

from enum import Enum
from typing import Optional
from datetime import date

from pydantic import BaseModel

from controle_gastos.models.transacao import TipoTransacao


class Periodo(str, Enum):
    DIA = "dia"
    SEMANA = "semana"
    MES = "mes"


class FiltroTransacoes(BaseModel):
    """
    Conjunctive filter over a user's transactions.

    `tipo=None` means every type. `periodo` and the explicit
    `data_inicio`/`data_fim` range are applied together, so a period
    combined with a range narrows further.
    """
    periodo: Optional[Periodo] = None
    tipo: Optional[TipoTransacao] = None
    data_inicio: Optional[date] = None
    data_fim: Optional[date] = None
    categoria: Optional[str] = None
