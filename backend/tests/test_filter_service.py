"""Tests for filtering and aggregation rules."""

import pytest
from datetime import date
from decimal import Decimal

from controle_gastos.models.transacao import TipoTransacao
from controle_gastos.schemas.filtro import FiltroTransacoes, Periodo
from controle_gastos.schemas.transacao import TransacaoResponse
from controle_gastos.services.filter_service import (
    filter_transacoes,
    in_periodo,
    summarize,
    summarize_by_categoria,
    week_start,
)

HOJE = date(2025, 4, 9)  # Wednesday


def txn(id, tipo, valor, data, categoria="Outros", descricao="x"):
    return TransacaoResponse(
        id=id,
        usuario_id=1,
        descricao=descricao,
        tipo=tipo,
        valor=Decimal(valor),
        data=data,
        categoria=categoria,
    )


@pytest.fixture
def transacoes():
    return [
        txn(1, TipoTransacao.receita, "3000", date(2025, 4, 1), "Outros"),
        txn(2, TipoTransacao.despesa, "35", date(2025, 4, 2), "Alimentação"),
        txn(3, TipoTransacao.despesa, "22", date(2025, 4, 6), "Transporte"),
        txn(4, TipoTransacao.despesa, "120", date(2025, 4, 9), "Alimentação"),
        txn(5, TipoTransacao.receita, "500", date(2025, 3, 28), "Freela"),
    ]


class TestPeriodo:

    def test_week_starts_on_sunday(self):
        assert week_start(HOJE) == date(2025, 4, 6)
        assert week_start(date(2025, 4, 6)) == date(2025, 4, 6)
        assert week_start(date(2025, 4, 12)) == date(2025, 4, 6)

    def test_dia(self):
        assert in_periodo(HOJE, Periodo.DIA, HOJE)
        assert not in_periodo(date(2025, 4, 8), Periodo.DIA, HOJE)

    def test_semana(self):
        assert in_periodo(date(2025, 4, 6), Periodo.SEMANA, HOJE)
        assert in_periodo(date(2025, 4, 12), Periodo.SEMANA, HOJE)
        assert not in_periodo(date(2025, 4, 5), Periodo.SEMANA, HOJE)

    def test_mes(self):
        assert in_periodo(date(2025, 4, 30), Periodo.MES, HOJE)
        assert not in_periodo(date(2025, 3, 31), Periodo.MES, HOJE)
        assert not in_periodo(date(2024, 4, 9), Periodo.MES, HOJE)

    def test_no_periodo(self):
        assert in_periodo(date(1999, 1, 1), None, HOJE)


class TestFilterTransacoes:

    def test_empty_filter_keeps_everything(self, transacoes):
        assert filter_transacoes(transacoes, FiltroTransacoes(), HOJE) == transacoes

    def test_tipo(self, transacoes):
        result = filter_transacoes(transacoes, FiltroTransacoes(tipo=TipoTransacao.despesa), HOJE)
        assert [t.id for t in result] == [2, 3, 4]

    def test_mes(self, transacoes):
        result = filter_transacoes(transacoes, FiltroTransacoes(periodo=Periodo.MES), HOJE)
        assert [t.id for t in result] == [1, 2, 3, 4]

    def test_date_range_is_inclusive(self, transacoes):
        filtro = FiltroTransacoes(data_inicio=date(2025, 4, 2), data_fim=date(2025, 4, 6))
        assert [t.id for t in filter_transacoes(transacoes, filtro, HOJE)] == [2, 3]

    def test_periodo_and_range_narrow_together(self, transacoes):
        filtro = FiltroTransacoes(
            periodo=Periodo.MES,
            data_inicio=date(2025, 3, 1),
            data_fim=date(2025, 4, 2),
        )
        # The March record is in range but outside the current month
        assert [t.id for t in filter_transacoes(transacoes, filtro, HOJE)] == [1, 2]

    def test_categoria_is_exact_match(self, transacoes):
        filtro = FiltroTransacoes(categoria="Alimentação")
        assert [t.id for t in filter_transacoes(transacoes, filtro, HOJE)] == [2, 4]

        filtro = FiltroTransacoes(categoria="Aliment")
        assert filter_transacoes(transacoes, filtro, HOJE) == []

    def test_every_result_satisfies_every_predicate(self, transacoes):
        filtro = FiltroTransacoes(
            periodo=Periodo.SEMANA,
            tipo=TipoTransacao.despesa,
            categoria="Alimentação",
        )
        result = filter_transacoes(transacoes, filtro, HOJE)
        assert [t.id for t in result] == [4]

    def test_defaults_to_today(self):
        today_txn = txn(1, TipoTransacao.despesa, "1", date.today())
        assert filter_transacoes([today_txn], FiltroTransacoes(periodo=Periodo.DIA)) == [today_txn]


class TestSummarize:

    def test_despesa_scenario(self, transacoes):
        filtradas = filter_transacoes(
            transacoes[:2], FiltroTransacoes(tipo=TipoTransacao.despesa), HOJE
        )
        assert [t.id for t in filtradas] == [2]

        resumo = summarize(filtradas)
        assert resumo.receita == Decimal("0")
        assert resumo.despesa == Decimal("35")
        assert resumo.saldo == Decimal("-35")
        assert resumo.total == 1

    def test_balance_over_filtered_set_only(self, transacoes):
        filtradas = filter_transacoes(transacoes, FiltroTransacoes(periodo=Periodo.MES), HOJE)
        resumo = summarize(filtradas)
        assert resumo.receita == Decimal("3000")
        assert resumo.despesa == Decimal("177")
        assert resumo.saldo == resumo.receita - resumo.despesa

    def test_empty(self):
        resumo = summarize([])
        assert resumo.saldo == Decimal("0")
        assert resumo.total == 0

    def test_by_categoria(self, transacoes):
        totals = summarize_by_categoria(transacoes)
        assert [c.categoria for c in totals] == ["Alimentação", "Transporte"]
        assert totals[0].valor == Decimal("155")
        assert totals[0].percentual == round(155 / 177 * 100, 1)

    def test_by_categoria_receita(self, transacoes):
        totals = summarize_by_categoria(transacoes, TipoTransacao.receita)
        assert [c.categoria for c in totals] == ["Outros", "Freela"]
