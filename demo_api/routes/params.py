# -*- coding: utf-8 -*-
"""
Conversão estrita de parâmetros de rota e de query para inteiro.
"""
import re
from typing import Optional
from fastapi import HTTPException, status

# Só dígitos ASCII com sinal opcional: sem espaços, "_" ou dígitos Unicode
_INT_PATTERN = re.compile(r"[+-]?[0-9]{1,10}", re.ASCII)
INT32_MIN, INT32_MAX = -2 ** 31, 2 ** 31 - 1


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Inteiro de 32 bits representado por raw, ou None se ausente, não numérico ou fora da faixa."""
    if raw is None or not _INT_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def parse_id(raw: str, detail: str = "Invalid ID") -> int:
    value = parse_int(raw)
    if value is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    return value
