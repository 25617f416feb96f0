# -*- coding: utf-8 -*-
"""
Modelos SQLAlchemy para o controle de despesas: Category e Transaction.
"""
import enum
from sqlalchemy import Column, Integer, String, Float, Enum, ForeignKey
from demo_api.database import Base


class TransactionType(str, enum.Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Category(Base):
    __tablename__ = 'categories'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, index=True, nullable=False)


class Transaction(Base):
    __tablename__ = 'transactions'

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(255), nullable=False)
    amount = Column(Float, nullable=False)
    type = Column(Enum(TransactionType, native_enum=False, length=10), nullable=False)
    date = Column(String(10), nullable=False, index=True) # YYYY-MM-DD
    # Não referencia categories.id: ids sem categoria aparecem como "Unknown" no relatório
    category_id = Column(Integer, nullable=False, index=True)
