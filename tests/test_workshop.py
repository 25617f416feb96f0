"""Tests for the unit converter and the product analysis pipeline."""

import pytest

from demo_api.product_analysis import (
    Product,
    calculate_total_electronics_price_over_500,
    count_electronics_over_500,
    count_products,
    total_price,
)
from demo_api.unit_converter import celsius_to_fahrenheit, kilometers_to_miles


@pytest.mark.parametrize(
    "celsius, fahrenheit",
    [(20.0, 68.0), (0.0, 32.0), (-10.0, 14.0), (-40.0, -40.0), (100.0, 212.0)],
)
def test_celsius_to_fahrenheit(celsius, fahrenheit):
    assert celsius_to_fahrenheit(celsius) == pytest.approx(fahrenheit, abs=0.001)


def test_kilometers_to_miles():
    assert kilometers_to_miles(1.0) == pytest.approx(0.621371, abs=0.000001)
    assert kilometers_to_miles(0.0) == 0.0
    assert kilometers_to_miles(10.0) == pytest.approx(6.21371)


@pytest.fixture
def products():
    return [
        Product("Laptop", 35000.0, "Electronics"),
        Product("Smartphone", 25000.0, "Electronics"),
        Product("T-shirt", 450.0, "Apparel"),
        Product("Monitor", 7500.0, "Electronics"),
        Product("Keyboard", 499.0, "Electronics"),
        Product("Jeans", 1200.0, "Apparel"),
        Product("Headphones", 1800.0, "Electronics"),
    ]


def test_total_price_of_electronics_over_500(products):
    assert calculate_total_electronics_price_over_500(products) == pytest.approx(69300.0)


def test_count_of_electronics_over_500(products):
    assert count_electronics_over_500(products) == 4


def test_threshold_is_strict():
    items = [Product("Cable", 500.0, "Electronics"), Product("Mouse", 500.01, "Electronics")]

    assert count_electronics_over_500(items) == 1


def test_generic_filters(products):
    assert count_products(products, "Apparel", 1000) == 1
    assert total_price(products, "Apparel", 0) == pytest.approx(1650.0)
    assert total_price([], "Electronics", 500) == 0
