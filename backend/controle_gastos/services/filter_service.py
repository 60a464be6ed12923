"""
Filtering and aggregation over a user's transactions.

Pure functions: they work on anything exposing `tipo`, `valor`, `data` and
`categoria` attributes (ORM rows or TransacaoResponse objects), so the API
summary endpoint and the client dashboard share the same rules.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from controle_gastos.models.transacao import TipoTransacao
from controle_gastos.schemas.filtro import FiltroTransacoes, Periodo
from controle_gastos.schemas.resumo import Resumo, CategoriaTotal


def _as_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        return date.fromisoformat(value.split("T")[0])
    return value


def week_start(day: date) -> date:
    """Sunday that opens the calendar week containing `day`."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def in_periodo(data: date, periodo: Optional[Periodo], hoje: date) -> bool:
    if periodo is None:
        return True
    if periodo == Periodo.DIA:
        return data == hoje
    if periodo == Periodo.SEMANA:
        return week_start(data) == week_start(hoje)
    if periodo == Periodo.MES:
        return data.year == hoje.year and data.month == hoje.month
    return True


def matches(transacao: Any, filtro: FiltroTransacoes, hoje: date) -> bool:
    """True when the transaction satisfies every active predicate."""
    data = _as_date(transacao.data)

    if not in_periodo(data, filtro.periodo, hoje):
        return False
    if filtro.tipo is not None and transacao.tipo != filtro.tipo:
        return False
    if filtro.data_inicio and data < filtro.data_inicio:
        return False
    if filtro.data_fim and data > filtro.data_fim:
        return False
    # Category is an exact match, not a substring search
    if filtro.categoria and transacao.categoria != filtro.categoria:
        return False
    return True


def filter_transacoes(
    transacoes: Iterable[Any],
    filtro: FiltroTransacoes,
    hoje: Optional[date] = None
) -> List[Any]:
    """Return the transactions matching the filter, keeping their order."""
    hoje = hoje or date.today()
    return [t for t in transacoes if matches(t, filtro, hoje)]


def summarize(transacoes: Iterable[Any]) -> Resumo:
    """
    Income and expense totals plus balance.
    Callers pass the filtered list; totals never look beyond it.
    """
    receita = Decimal("0")
    despesa = Decimal("0")
    total = 0

    for t in transacoes:
        valor = Decimal(str(t.valor))
        if t.tipo == TipoTransacao.receita:
            receita += valor
        else:
            despesa += valor
        total += 1

    return Resumo(receita=receita, despesa=despesa, saldo=receita - despesa, total=total)


def summarize_by_categoria(
    transacoes: Iterable[Any],
    tipo: TipoTransacao = TipoTransacao.despesa
) -> List[CategoriaTotal]:
    """Per-category totals for one type, largest first."""
    totals: Dict[str, Decimal] = {}
    for t in transacoes:
        if t.tipo != tipo:
            continue
        totals[t.categoria] = totals.get(t.categoria, Decimal("0")) + Decimal(str(t.valor))

    grand_total = sum(totals.values(), Decimal("0"))

    return [
        CategoriaTotal(
            categoria=categoria,
            valor=valor,
            percentual=round(float(valor / grand_total * 100), 1) if grand_total > 0 else 0.0
        )
        for categoria, valor in sorted(totals.items(), key=lambda x: x[1], reverse=True)
    ]
