"""
JSON import schemas.
"""

from pydantic import BaseModel
from typing import List


class ImportErro(BaseModel):
    indice: int
    erro: str


class ImportReport(BaseModel):
    importadas: int = 0
    ids: List[int] = []
    erros: List[ImportErro] = []
