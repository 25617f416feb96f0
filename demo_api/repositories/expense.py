# -*- coding: utf-8 -*-
"""
Repositórios de categorias e transações sobre uma Session SQLAlchemy.

Os ids são gerados pelo autoincremento do banco; cada requisição recebe sua
própria sessão via get_db.
"""
import datetime
from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from demo_api.models.expense import Category, Transaction
from demo_api.schemas.expense import NewCategory, NewTransaction
from demo_api.reports import parse_transaction_date


class CategoryRepository:

    def __init__(self, db: Session):
        self.db = db

    def create(self, new_category: NewCategory) -> Category:
        # IntegrityError (nome duplicado) fica a cargo de quem chama
        db_category = Category(name=new_category.name)
        self.db.add(db_category)
        self.db.commit()
        self.db.refresh(db_category)
        return db_category

    def find_all(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.id).all()

    def find_by_id(self, category_id: int) -> Optional[Category]:
        return self.db.query(Category).filter(Category.id == category_id).first()

    def name_lookup(self) -> Dict[int, str]:
        """Mapa id -> nome usado pelo relatório mensal."""
        return {c.id: c.name for c in self.db.query(Category.id, Category.name).all()}


class TransactionRepository:

    def __init__(self, db: Session):
        self.db = db

    def create(self, new_transaction: NewTransaction) -> Transaction:
        tx_date = new_transaction.date or datetime.date.today()
        db_transaction = Transaction(
            description=new_transaction.description,
            amount=new_transaction.amount,
            type=new_transaction.type,
            date=tx_date.isoformat(),
            category_id=new_transaction.category_id
        )
        self.db.add(db_transaction)
        self.db.commit()
        self.db.refresh(db_transaction)
        return db_transaction

    def find_all(self) -> List[Transaction]:
        return self.db.query(Transaction).order_by(Transaction.id).all()

    def find_by_month(self, year: int, month: int) -> List[Transaction]:
        """
        Transações (de qualquer tipo) cuja data cai no ano/mês informados.
        Datas inválidas nunca casam.
        """
        # O prefixo só reduz a consulta; a comparação vale sobre a data convertida
        prefix = f"{year:04d}-{month:02d}-"
        candidates = (
            self.db.query(Transaction)
            .filter(Transaction.date.like(f"{prefix}%"))
            .order_by(Transaction.id)
            .all()
        )
        result = []
        for tx in candidates:
            tx_date = parse_transaction_date(tx.date)
            if tx_date is not None and tx_date.year == year and tx_date.month == month:
                result.append(tx)
        return result
