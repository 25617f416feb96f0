# -*- coding: utf-8 -*-
"""
Rotas FastAPI para as categorias do controle de despesas.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from demo_api.database import get_db
from demo_api.routes.params import parse_id
from demo_api.repositories.expense import CategoryRepository
from demo_api.schemas.expense import NewCategory, CategoryRead

router = APIRouter(
    tags=["Categories"],
    responses={404: {"description": "Categoria não encontrada"}},
)

@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(category: NewCategory, db: Session = Depends(get_db)):
    """
    Cria uma nova categoria. Nomes são únicos.
    """
    try:
        return CategoryRepository(db).create(category)
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category with this name already exists."
        )

@router.get("", response_model=List[CategoryRead])
def read_categories(db: Session = Depends(get_db)):
    return CategoryRepository(db).find_all()

@router.get("/{category_id}", response_model=CategoryRead)
def read_category(category_id: str, db: Session = Depends(get_db)):
    db_category = CategoryRepository(db).find_by_id(parse_id(category_id))
    if db_category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return db_category
