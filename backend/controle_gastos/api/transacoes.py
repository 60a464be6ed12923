"""
Transaction API endpoints.
"""

import logging
from datetime import date
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from controle_gastos.dependencies import get_db, get_current_usuario_id
from controle_gastos.models.transacao import TipoTransacao
from controle_gastos.schemas.filtro import FiltroTransacoes, Periodo
from controle_gastos.schemas.import_file import ImportReport
from controle_gastos.schemas.resumo import ResumoResponse
from controle_gastos.schemas.transacao import (
    TransacaoCreate,
    TransacaoCreated,
    TransacaoResponse,
    BulkDeleteRequest,
    BulkDeleteResponse,
)
from controle_gastos.services import export_service, filter_service, transacao_service
from controle_gastos.services.transacao_service import TransacaoNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transacoes", tags=["transacoes"])


def get_filtro(
    periodo: Optional[Periodo] = None,
    tipo: Optional[TipoTransacao] = None,
    data_inicio: Optional[date] = None,
    data_fim: Optional[date] = None,
    categoria: Optional[str] = None,
) -> FiltroTransacoes:
    """Filter specification from query parameters."""
    return FiltroTransacoes(
        periodo=periodo,
        tipo=tipo,
        data_inicio=data_inicio,
        data_fim=data_fim,
        categoria=categoria,
    )


def _store_error(db: Session, message: str) -> HTTPException:
    db.rollback()
    logger.exception(message)
    return HTTPException(status_code=500, detail=message)


@router.post("", response_model=TransacaoCreated, status_code=201)
def create_transacao(
    dados: TransacaoCreate,
    usuario_id: int = Depends(get_current_usuario_id),
    db: Session = Depends(get_db)
):
    """Create a transaction owned by the caller."""
    try:
        new_id = transacao_service.create_transacao(db, usuario_id, dados)
    except SQLAlchemyError:
        raise _store_error(db, "Erro ao salvar transação.")
    return TransacaoCreated(id=new_id)


@router.get("", response_model=List[TransacaoResponse])
def list_transacoes(
    usuario_id: int = Depends(get_current_usuario_id),
    db: Session = Depends(get_db)
):
    """List every transaction of the caller. Filtering happens client-side."""
    try:
        transacoes = transacao_service.list_transacoes(db, usuario_id)
    except SQLAlchemyError:
        raise _store_error(db, "Erro ao buscar transações.")
    return [TransacaoResponse.model_validate(t) for t in transacoes]


@router.get("/resumo", response_model=ResumoResponse)
def get_resumo(
    filtro: FiltroTransacoes = Depends(get_filtro),
    usuario_id: int = Depends(get_current_usuario_id),
    db: Session = Depends(get_db)
):
    """
    Totals for the filtered transactions.
    Returns: receita, despesa, saldo, total, por_categoria (expenses)
    """
    try:
        transacoes = transacao_service.list_transacoes(db, usuario_id)
    except SQLAlchemyError:
        raise _store_error(db, "Erro ao buscar transações.")

    filtradas = filter_service.filter_transacoes(transacoes, filtro)
    resumo = filter_service.summarize(filtradas)

    return ResumoResponse(
        **resumo.model_dump(),
        por_categoria=filter_service.summarize_by_categoria(filtradas)
    )


@router.get("/exportar")
def export_transacoes(
    formato: str = Query("csv", pattern="^(csv|json)$"),
    filtro: FiltroTransacoes = Depends(get_filtro),
    usuario_id: int = Depends(get_current_usuario_id),
    db: Session = Depends(get_db)
):
    """Download the filtered transactions as CSV or JSON."""
    try:
        transacoes = transacao_service.list_transacoes(db, usuario_id)
    except SQLAlchemyError:
        raise _store_error(db, "Erro ao buscar transações.")

    filtradas = filter_service.filter_transacoes(transacoes, filtro)

    if formato == "json":
        return Response(
            content=export_service.to_json(filtradas),
            media_type="application/json",
            headers={"Content-Disposition": 'attachment; filename="backup-transacoes.json"'},
        )

    return Response(
        content=export_service.to_csv(filtradas),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="transacoes.csv"'},
    )


@router.post("/importar", response_model=ImportReport)
def import_transacoes(
    registros: List[Any] = Body(...),
    usuario_id: int = Depends(get_current_usuario_id),
    db: Session = Depends(get_db)
):
    """Create each record of a JSON array independently, reporting failures per record."""

    def create(dados: TransacaoCreate) -> int:
        try:
            return transacao_service.create_transacao(db, usuario_id, dados)
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception("Failed to store imported record")
            raise RuntimeError("Erro ao salvar transação.") from e

    report = export_service.import_records(registros, create)
    logger.info(
        f"Import for usuario {usuario_id}: {report.importadas} created, {len(report.erros)} rejected"
    )
    return report


@router.put("/{transacao_id}", status_code=204)
def update_transacao(
    transacao_id: int,
    dados: TransacaoCreate,
    usuario_id: int = Depends(get_current_usuario_id),
    db: Session = Depends(get_db)
):
    """Replace a transaction. Someone else's transaction is reported as missing."""
    try:
        transacao_service.update_transacao(db, usuario_id, transacao_id, dados)
    except TransacaoNotFoundError:
        raise HTTPException(status_code=404, detail="Transação não encontrada.")
    except SQLAlchemyError:
        raise _store_error(db, "Erro ao atualizar transação.")
    return None


@router.delete("/{transacao_id}", status_code=204)
def delete_transacao(
    transacao_id: int,
    usuario_id: int = Depends(get_current_usuario_id),
    db: Session = Depends(get_db)
):
    """Delete one transaction of the caller."""
    try:
        transacao_service.delete_transacao(db, usuario_id, transacao_id)
    except TransacaoNotFoundError:
        raise HTTPException(status_code=404, detail="Transação não encontrada.")
    except SQLAlchemyError:
        raise _store_error(db, "Erro ao excluir transação.")
    return None


@router.delete("", response_model=BulkDeleteResponse)
def delete_transacoes(
    request: BulkDeleteRequest,
    usuario_id: int = Depends(get_current_usuario_id),
    db: Session = Depends(get_db)
):
    """Bulk delete by id list. Invalid ids are dropped, foreign ids are ignored."""
    ids = transacao_service.sanitize_ids(request.ids)
    if not ids:
        raise HTTPException(status_code=400, detail="Nenhuma transação selecionada.")

    try:
        deletadas = transacao_service.delete_transacoes(db, usuario_id, ids)
    except SQLAlchemyError:
        raise _store_error(db, "Erro ao excluir transações.")
    return BulkDeleteResponse(deletadas=deletadas)
