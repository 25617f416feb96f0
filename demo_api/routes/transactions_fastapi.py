# -*- coding: utf-8 -*-
"""
Rotas FastAPI para as transações (receitas e despesas).
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from demo_api.database import get_db
from demo_api.repositories.expense import TransactionRepository
from demo_api.schemas.expense import NewTransaction, TransactionRead

router = APIRouter(
    tags=["Transactions"],
)

@router.post("", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
def create_transaction(transaction: NewTransaction, db: Session = Depends(get_db)):
    """
    Registra uma transação. Um "id" enviado pelo cliente é ignorado.
    """
    return TransactionRepository(db).create(transaction)

@router.get("", response_model=List[TransactionRead])
def read_transactions(db: Session = Depends(get_db)):
    return TransactionRepository(db).find_all()
