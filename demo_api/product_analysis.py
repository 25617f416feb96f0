# -*- coding: utf-8 -*-
"""
Pipeline simples de análise de produtos: filtra por categoria e preço mínimo
e agrega os resultados.
"""
from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class Product:
    name: str
    price: float
    category: str


def filter_products(products: Iterable[Product], category: str, min_price: float) -> List[Product]:
    """Produtos da categoria com preço estritamente maior que min_price."""
    return [p for p in products if p.category == category and p.price > min_price]


def total_price(products: Iterable[Product], category: str, min_price: float) -> float:
    return sum(p.price for p in filter_products(products, category, min_price))


def count_products(products: Iterable[Product], category: str, min_price: float) -> int:
    return len(filter_products(products, category, min_price))


def calculate_total_electronics_price_over_500(products: Iterable[Product]) -> float:
    return total_price(products, "Electronics", 500)


def count_electronics_over_500(products: Iterable[Product]) -> int:
    return count_products(products, "Electronics", 500)
