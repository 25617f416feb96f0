# -*- coding: utf-8 -*-
"""
Conversões de unidade usadas nos exercícios do workshop.
"""

MILES_PER_KILOMETER = 0.621371


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def kilometers_to_miles(kilometers: float) -> float:
    return kilometers * MILES_PER_KILOMETER
