# -*- coding: utf-8 -*-
"""
Schemas Pydantic para categorias, transações e o relatório mensal de despesas.
"""

import datetime
from pydantic import BaseModel, Field
from typing import Optional, List

from demo_api.models.expense import TransactionType

class NewCategory(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)

class CategoryRead(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class NewTransaction(BaseModel):
    description: str = Field(..., max_length=255)
    amount: float
    type: TransactionType
    # Sem data informada, a transação é registrada no dia atual
    date: Optional[datetime.date] = None
    category_id: int = Field(..., alias="categoryId")

    class Config:
        populate_by_name = True

class TransactionRead(BaseModel):
    id: int
    description: str
    amount: float
    type: TransactionType
    date: str
    category_id: int = Field(..., alias="categoryId")

    class Config:
        from_attributes = True
        populate_by_name = True


class CategoryExpense(BaseModel):
    category_name: str = Field(..., alias="categoryName")
    total_amount: float = Field(..., alias="totalAmount")

    class Config:
        populate_by_name = True

class MonthlyReport(BaseModel):
    year: int
    month: int
    expenses_by_category: List[CategoryExpense] = Field(default_factory=list, alias="expensesByCategory")

    class Config:
        populate_by_name = True
