# src/string_calculator/modules/calculator/domain/header.py
"""
Extractor de cabecera de delimitadores personalizados.

Arquitectura: Domain Layer
Responsabilidad: Detectar y separar la cabecera opcional `//[d1][d2]...\\n`
del cuerpo de números.

Formato:
    //[;]\\n1;2;3          → delimitadores (";",), cuerpo "1;2;3"
    //[***][%]\\n1***2%3   → delimitadores ("***", "%"), cuerpo "1***2%3"
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .value_objects import DelimiterSet

# La detección SÍ usa patrón; la división del cuerpo NO (ver tokenizer.py).
# Cada grupo: '[' + caracteres que no sean dígitos (el salto de línea vale) + ']'
# Coincidencia perezosa: el primer ']\n' cierra la cabecera
HEADER_PATTERN = re.compile(r"//((?:\[[^\d]+?\])+)\n(.*)\Z", re.DOTALL)


@dataclass(frozen=True)
class HeaderMatch:
    """Resultado de una cabecera reconocida."""

    delimiters: DelimiterSet
    body: str


def parse_delimiter_groups(section: str) -> tuple[str, ...]:
    """
    Convierte '[*][%%]' en ('*', '%%').

    Divide por '[' y ']' y descarta fragmentos vacíos.
    """
    return tuple(fragment for fragment in re.split(r"[\[\]]", section) if fragment)


def extract_header(numbers: str) -> HeaderMatch | None:
    """
    Intenta reconocer la cabecera al inicio de la entrada.

    Returns:
        HeaderMatch con los delimitadores declarados y el resto de la entrada,
        o None si la entrada no empieza con una cabecera válida (sin grupos,
        grupos con dígitos, etc.). En ese caso se usa la entrada completa.
    """
    match = HEADER_PATTERN.match(numbers)
    if match is None:
        return None

    section, body = match.groups()
    delimiters = parse_delimiter_groups(section)
    # '//[[]]' solo contiene corchetes: no declara ningún delimitador
    if not delimiters:
        return None
    return HeaderMatch(delimiters=DelimiterSet(delimiters), body=body)
