# -*- coding: utf-8 -*-
"""
Relatório mensal de despesas por categoria.

Função pura sobre snapshots de transações e de nomes de categoria; não acessa
o banco. As rotas montam os snapshots pelos repositórios e chamam
compute_monthly_report.
"""

import calendar
import datetime
import logging
from typing import Any, Iterable, Mapping, Optional, Tuple

from demo_api.models.expense import TransactionType
from demo_api.schemas.expense import CategoryExpense, MonthlyReport

UNKNOWN_CATEGORY = "Unknown"


def month_range(year: int, month: int) -> Optional[Tuple[datetime.date, datetime.date]]:
    """Primeiro e último dia do mês (inclusivos), ou None se o mês não existe no calendário."""
    if not 1 <= month <= 12 or not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        return None
    last_day = calendar.monthrange(year, month)[1]
    return datetime.date(year, month, 1), datetime.date(year, month, last_day)


def parse_transaction_date(value: Any) -> Optional[datetime.date]:
    """Converte a data de uma transação (YYYY-MM-DD ou date) para date. None se inválida."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str) or len(value) != 10:
        return None
    try:
        return datetime.datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def compute_monthly_report(
    year: int,
    month: int,
    transactions: Iterable[Any],
    categories: Mapping[int, str],
) -> MonthlyReport:
    """
    Soma as despesas (type == EXPENSE) do mês por categoria.

    - transactions: objetos com id, amount, type, date e category_id
    - categories: mapa category_id -> nome

    Datas que não são YYYY-MM-DD válidas são ignoradas em todos os relatórios.
    Ids sem categoria entram juntos em "Unknown". A saída segue o id da
    categoria em ordem crescente, com "Unknown" por último.
    """
    period = month_range(year, month)
    if period is None:
        return MonthlyReport(year=year, month=month, expenses_by_category=[])
    start, end = period

    # None agrupa todos os ids que não resolvem para uma categoria
    totals = {}
    for tx in transactions:
        if tx.type != TransactionType.EXPENSE:
            continue
        tx_date = parse_transaction_date(tx.date)
        if tx_date is None:
            logging.warning(f"Transação {tx.id} ignorada no relatório: data inválida {tx.date!r}")
            continue
        if not start <= tx_date <= end:
            continue
        key = tx.category_id if tx.category_id in categories else None
        if key in totals:
            totals[key] = totals[key] + tx.amount
        else:
            totals[key] = tx.amount

    expenses = [
        CategoryExpense(category_name=categories[key], total_amount=totals[key])
        for key in sorted(k for k in totals if k is not None)
    ]
    if None in totals:
        expenses.append(CategoryExpense(category_name=UNKNOWN_CATEGORY, total_amount=totals[None]))

    logging.debug(f"Relatório {year}-{month:02d}: {len(expenses)} categorias")
    return MonthlyReport(year=year, month=month, expenses_by_category=expenses)
