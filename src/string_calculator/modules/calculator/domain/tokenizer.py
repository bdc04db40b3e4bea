# src/string_calculator/modules/calculator/domain/tokenizer.py
"""
Tokenizador y validador estructural.

Arquitectura: Domain Layer
Responsabilidad: Rechazar cuerpos que empiezan o terminan en delimitador
(fail fast) y dividir el cuerpo en tokens usando coincidencia LITERAL.
"""

from __future__ import annotations

from string_calculator.core.result import Err, Ok, Result

from .errors import StartingOrEndingByDelimiter
from .value_objects import DelimiterSet

# === Guía de Organización ===
# ❌ SIN REGEX: los delimitadores son texto arbitrario ('*', '.', '|', ...).
#    Nunca se construye un patrón a partir de ellos.


def check_structure(
    body: str, delimiters: DelimiterSet
) -> Result[str, StartingOrEndingByDelimiter]:
    """
    Compuerta única (sin acumulación): el cuerpo no puede empezar ni terminar
    con ningún delimitador del conjunto.
    """
    if delimiters.bounds(body):
        return Err(StartingOrEndingByDelimiter())
    return Ok(body)


def split_literal(body: str, delimiters: DelimiterSet) -> list[str]:
    """
    Divide `body` por cualquiera de los delimitadores, como subcadenas exactas.

    En cada posición se prueban los delimitadores en orden declarado y se
    consume el primero que coincide.
    """
    parts: list[str] = []
    start = 0
    index = 0

    while index < len(body):
        delimiter = delimiters.match_at(body, index)
        if delimiter is None:
            index += 1
            continue
        parts.append(body[start:index])
        index += len(delimiter)
        start = index

    parts.append(body[start:])
    return parts


def tokenize(body: str, delimiters: DelimiterSet) -> list[str]:
    """Divide el cuerpo y elimina espacios en blanco alrededor de cada token."""
    return [token.strip() for token in split_literal(body, delimiters)]
