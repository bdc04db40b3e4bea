# src/string_calculator/modules/calculator/domain/validation.py
"""
Validador numérico y agregador.

Arquitectura: Domain Layer
Responsabilidad: Convertir tokens en enteros, rechazar negativos, filtrar por
magnitud y sumar.

Las dos primeras pasadas son ACUMULATIVAS: revisan todos los elementos y
reportan todos los fallos de su tipo, no solo el primero.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from string_calculator.core.result import Err, Ok, Result, traverse_validated

from .errors import InvalidNumbers, NegativeIntegers
from .value_objects import INT_MAX, INT_MIN, MAX_VALUE

# Solo dígitos ASCII: sin '_', sin espacios internos, sin dígitos Unicode
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(token: str) -> int | None:
    """Entero con signo acotado a 32 bits, o None si el token no lo es."""
    if not INTEGER_PATTERN.fullmatch(token):
        return None
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def _check_int(token: str) -> Result[int, InvalidNumbers]:
    value = parse_int(token)
    if value is None:
        return Err(InvalidNumbers.single(token))
    return Ok(value)


def _check_non_negative(value: int) -> Result[int, NegativeIntegers]:
    if value < 0:
        return Err(NegativeIntegers.single(value))
    return Ok(value)


def only_ints(tokens: Iterable[str]) -> Result[list[int], InvalidNumbers]:
    """Pasada 1: todos los tokens deben ser enteros; acumula los inválidos."""
    return traverse_validated(tokens, _check_int)


def only_positive_ints(values: Iterable[int]) -> Result[list[int], NegativeIntegers]:
    """Pasada 2: ningún entero puede ser negativo; acumula los negativos."""
    return traverse_validated(values, _check_non_negative)


def drop_above_limit(values: Iterable[int], limit: int = MAX_VALUE) -> list[int]:
    """Descarta en silencio los valores estrictamente mayores que `limit`."""
    return [value for value in values if value <= limit]
