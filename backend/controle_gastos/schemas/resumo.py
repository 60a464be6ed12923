"""
Summary schemas.
"""

from pydantic import BaseModel
from typing import List
from decimal import Decimal


class Resumo(BaseModel):
    receita: Decimal
    despesa: Decimal
    saldo: Decimal
    total: int


class CategoriaTotal(BaseModel):
    categoria: str
    valor: Decimal
    percentual: float


class ResumoResponse(Resumo):
    por_categoria: List[CategoriaTotal] = []
