# src/string_calculator/modules/calculator/domain/errors.py
"""
Errores del dominio de la Calculadora.

Arquitectura: Domain Layer
Responsabilidad: Definir el conjunto CERRADO de errores de `add` como valores
(no excepciones), para poder combinarlos y distinguirlos de forma exhaustiva.

Variantes:
    - InvalidNumbers: tokens que no son enteros (combinable).
    - StartingOrEndingByDelimiter: la entrada empieza o termina en delimitador.
    - NegativeIntegers: enteros negativos encontrados (combinable).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class AddError(ABC):
    """Clase base de los errores de `add`. Solo existen las tres variantes de abajo."""

    kind: str = "add_error"

    @abstractmethod
    def describe(self) -> str:
        """Mensaje legible para humanos."""

    def payload(self) -> list:
        """Valores asociados al error (vacío si la variante no transporta datos)."""
        return []


@dataclass(frozen=True)
class InvalidNumbers(AddError):
    """Uno o más tokens no pudieron interpretarse como enteros."""

    raw: tuple[str, ...]

    kind = "invalid_numbers"

    def __post_init__(self):
        object.__setattr__(self, "raw", tuple(self.raw))

    @classmethod
    def single(cls, token: str) -> InvalidNumbers:
        return cls((token,))

    @property
    def values(self) -> tuple[str, ...]:
        return self.raw

    def combine(self, other: InvalidNumbers) -> InvalidNumbers:
        """Concatena los tokens inválidos (izquierda primero, sin deduplicar)."""
        if not isinstance(other, InvalidNumbers):
            raise TypeError(f"No se puede combinar InvalidNumbers con {type(other).__name__}")
        return InvalidNumbers(self.raw + other.raw)

    def __add__(self, other: InvalidNumbers) -> InvalidNumbers:
        return self.combine(other)

    def describe(self) -> str:
        return "Números inválidos: " + ", ".join(repr(token) for token in self.raw)

    def payload(self) -> list:
        return list(self.raw)


@dataclass(frozen=True)
class StartingOrEndingByDelimiter(AddError):
    """La entrada empieza o termina con un delimitador."""

    kind = "starting_or_ending_by_delimiter"

    def describe(self) -> str:
        return "La entrada no puede empezar ni terminar con un delimitador."


@dataclass(frozen=True)
class NegativeIntegers(AddError):
    """Se encontraron enteros negativos (en orden de aparición, con duplicados)."""

    values: tuple[int, ...]

    kind = "negative_integers"

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def single(cls, value: int) -> NegativeIntegers:
        return cls((value,))

    def combine(self, other: NegativeIntegers) -> NegativeIntegers:
        """Concatena los negativos (izquierda primero, sin deduplicar)."""
        if not isinstance(other, NegativeIntegers):
            raise TypeError(f"No se puede combinar NegativeIntegers con {type(other).__name__}")
        return NegativeIntegers(self.values + other.values)

    def __add__(self, other: NegativeIntegers) -> NegativeIntegers:
        return self.combine(other)

    def describe(self) -> str:
        return "Negativos no permitidos: " + ", ".join(str(v) for v in self.values)

    def payload(self) -> list:
        return list(self.values)
