"""
Client-side state of the transactions dashboard.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from controle_gastos.client.api_client import ApiClient
from controle_gastos.client.selection import SelectionSet
from controle_gastos.schemas.filtro import FiltroTransacoes, Periodo
from controle_gastos.schemas.import_file import ImportReport
from controle_gastos.schemas.resumo import Resumo, CategoriaTotal
from controle_gastos.schemas.transacao import TransacaoCreate, TransacaoResponse
from controle_gastos.services import export_service, filter_service

logger = logging.getLogger(__name__)


class NothingSelectedError(Exception):
    """Bulk delete requested with an empty selection."""


class Dashboard:
    """
    Loads the user's transactions once and derives the visible list,
    the summary and the selection from the current filter.
    """

    def __init__(
        self,
        api: ApiClient,
        filtro: Optional[FiltroTransacoes] = None,
        hoje: Callable[[], date] = date.today
    ):
        self.api = api
        self.filtro = filtro if filtro is not None else FiltroTransacoes(periodo=Periodo.MES)
        self.hoje = hoje
        self.transacoes: List[TransacaoResponse] = []
        self.selection = SelectionSet()

    # Loading and filtering

    def reload(self) -> None:
        self.transacoes = self.api.list_transacoes()
        self.selection.retain(self.visible_ids)

    @property
    def visible(self) -> List[TransacaoResponse]:
        return filter_service.filter_transacoes(self.transacoes, self.filtro, self.hoje())

    @property
    def visible_ids(self) -> List[int]:
        return [t.id for t in self.visible]

    @property
    def resumo(self) -> Resumo:
        return filter_service.summarize(self.visible)

    @property
    def por_categoria(self) -> List[CategoriaTotal]:
        return filter_service.summarize_by_categoria(self.visible)

    def set_filtro(self, filtro: FiltroTransacoes) -> None:
        self.filtro = filtro
        self.selection.retain(self.visible_ids)

    # Single-row operations

    def save(self, dados: TransacaoCreate, transacao_id: Optional[int] = None) -> Optional[int]:
        """Create when no id is given, otherwise replace. Reloads afterwards."""
        new_id = None
        if transacao_id is None:
            new_id = self.api.create_transacao(dados)
        else:
            self.api.update_transacao(transacao_id, dados)
        self.reload()
        return new_id

    def delete(self, transacao_id: int) -> None:
        self.api.delete_transacao(transacao_id)
        self.reload()

    # Selection

    def toggle_all(self) -> None:
        self.selection.toggle_all(self.visible_ids)

    def toggle_one(self, transacao_id: int) -> None:
        """Flip one visible row. Ids outside the visible list are ignored."""
        if transacao_id not in self.visible_ids:
            logger.debug(f"Ignoring selection of hidden transacao {transacao_id}")
            return
        self.selection.toggle_one(transacao_id)

    def delete_selected(self) -> int:
        """
        One bulk request for the selected ids.
        The selection survives a failed request so the user can retry.
        """
        if len(self.selection) == 0:
            raise NothingSelectedError("Nenhuma transação selecionada.")

        deletadas = self.api.delete_transacoes(self.selection.ids)
        self.selection.clear()
        self.reload()
        return deletadas

    # Export / import

    def export_csv(self) -> str:
        return export_service.to_csv(self.visible)

    def export_json(self) -> str:
        return export_service.to_json(self.visible)

    def import_json(self, text: str) -> ImportReport:
        """
        Submit each record of a JSON array as its own create request.
        Raises ValueError when the text is not a JSON array.
        """
        registros = export_service.parse_import_payload(text)
        report = export_service.import_records(registros, self.api.create_transacao)
        if report.erros:
            logger.warning(f"Import finished with {len(report.erros)} rejected records")
        self.reload()
        return report
