# src/string_calculator/core/result.py
"""
Result Value Objects.

Arquitectura: Modular Monolith
Componente: Building block universal (core)
Responsabilidad: Representar el resultado de una operación como valor
(Ok | Err), sin usar excepciones como flujo de control.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, Union

# === 🧭 Protocolos Arquitectónicos ===
# ✅ CORE: No depende de nada externo.
# 🔒 Inmutabilidad: frozen=True.

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
C = TypeVar("C", bound="Combinable")


class UnwrapError(ValueError):
    """Se pidió el valor del lado equivocado de un Result."""


class Combinable(Protocol):
    """
    Contrato para errores acumulables (semigrupo).

    Ley: a.combine(b).combine(c) == a.combine(b.combine(c))
    """

    def combine(self: C, other: C) -> C: ...


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Resultado exitoso que transporta un valor."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[object], object]) -> Ok[T]:
        return self

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Encadena una operación que también puede fallar (fail fast)."""
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self):
        raise UnwrapError(f"unwrap_err() llamado sobre {self!r}")


@dataclass(frozen=True)
class Err(Generic[E]):
    """Resultado fallido que transporta un error (valor, no excepción)."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[object], object]) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[object], object]) -> Err[E]:
        return self

    def unwrap(self):
        raise UnwrapError(f"unwrap() llamado sobre {self!r}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]


def traverse_validated(
    items: Iterable[T], check: Callable[[T], Result[U, C]]
) -> Result[list[U], C]:
    """
    Aplica `check` a TODOS los elementos y acumula todos los errores.

    A diferencia de `and_then` (que se detiene en el primer fallo), aquí
    se revisa la colección completa: si algún elemento falla, el resultado
    es un único Err con los errores combinados en orden de aparición.

    Args:
        items: Elementos a validar.
        check: Validación individual que retorna Ok(valor) o Err(error combinable).

    Returns:
        Ok(lista de valores) si todos pasan, o Err(errores combinados).
    """
    values: list[U] = []
    accumulated: C | None = None

    for item in items:
        outcome = check(item)
        if isinstance(outcome, Err):
            error = outcome.error
            accumulated = error if accumulated is None else accumulated.combine(error)
        elif accumulated is None:
            values.append(outcome.value)

    if accumulated is not None:
        return Err(accumulated)
    return Ok(values)
