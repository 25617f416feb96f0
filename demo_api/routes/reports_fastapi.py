# -*- coding: utf-8 -*-
"""
Rota do relatório mensal de despesas por categoria.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from demo_api.database import get_db
from demo_api.routes.params import parse_int
from demo_api.reports import compute_monthly_report
from demo_api.repositories.expense import CategoryRepository, TransactionRepository
from demo_api.schemas.expense import MonthlyReport

router = APIRouter(
    tags=["Reports"],
)

@router.get(
    "/monthly",
    response_model=MonthlyReport,
    responses={400: {"description": "year ou month ausente ou não numérico"}},
)
def read_monthly_report(
    year: Optional[str] = None,
    month: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Total de despesas do mês por categoria. Mês fora de 1-12 gera relatório vazio.
    """
    # Validação manual: a resposta de erro é texto puro, não o 422 padrão
    year_value = parse_int(year)
    month_value = parse_int(month)
    if year_value is None or month_value is None:
        return PlainTextResponse(
            "Missing or invalid 'year' or 'month' query parameters.",
            status_code=status.HTTP_400_BAD_REQUEST
        )

    transactions = TransactionRepository(db).find_all()
    categories = CategoryRepository(db).name_lookup()
    return compute_monthly_report(year_value, month_value, transactions, categories)
