# src/string_calculator/modules/calculator/domain/calculator.py
"""
Operación principal: add.

Arquitectura: Domain Layer
Responsabilidad: Componer el pipeline
    Cabecera → Estructura/Tokens → Enteros → Signo → Filtro → Suma

Máquina de estados:
    entrada vacía            → Ok(0)
    empieza/termina en delim → Err(StartingOrEndingByDelimiter)
    tokens no enteros        → Err(InvalidNumbers)
    enteros negativos        → Err(NegativeIntegers)
    resto                    → Ok(suma de valores <= 1000)
"""

from __future__ import annotations

from collections.abc import Iterable

from string_calculator.core.result import Ok, Result

from .errors import AddError
from .header import extract_header
from .tokenizer import check_structure, tokenize
from .validation import drop_above_limit, only_ints, only_positive_ints
from .value_objects import DEFAULT_DELIMITERS, DelimiterSet


def add(
    numbers: str, delimiters: Iterable[str] | DelimiterSet = DEFAULT_DELIMITERS
) -> Result[int, AddError]:
    """
    Suma los números de `numbers` separados por `delimiters`.

    Si la entrada empieza con una cabecera `//[...]\\n`, sus delimitadores
    reemplazan a los recibidos y solo se procesa el resto de la entrada.

    Args:
        numbers: Texto de entrada (puede estar vacío).
        delimiters: Delimitadores literales (por defecto "," y salto de línea).

    Returns:
        Ok(suma) o Err con exactamente una variante de AddError.
    """
    header = extract_header(numbers)
    if header is not None:
        return _add_body(header.body, header.delimiters)
    return _add_body(numbers, DelimiterSet.of(delimiters))


def _add_body(body: str, delimiters: DelimiterSet) -> Result[int, AddError]:
    """Rutina compartida para el cuerpo, ya sin cabecera."""
    if not body:
        return Ok(0)

    return (
        check_structure(body, delimiters)
        .map(lambda checked: tokenize(checked, delimiters))
        .and_then(only_ints)
        .and_then(only_positive_ints)
        .map(drop_above_limit)
        .map(sum)
    )
