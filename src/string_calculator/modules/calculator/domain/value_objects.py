# src/string_calculator/modules/calculator/domain/value_objects.py
"""
DelimiterSet Value Object y constantes del dominio.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Representar un conjunto ordenado y validado de delimitadores.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# === Guía de Organización ===
# ✅ PUREZA: Solo tipos nativos y lógica de validación pura.
# ❌ SIN I/O: Nada de logging ni lectura de archivos aquí.

DEFAULT_DELIMITERS: tuple[str, ...] = (",", "\n")

# Valores mayores a este límite se ignoran (no es un error)
MAX_VALUE = 1000

# Enteros acotados de máquina (32 bits con signo)
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class DelimiterSet:
    """
    Secuencia ordenada de separadores literales.

    Invariantes:
    1. Al menos un delimitador.
    2. Ningún delimitador vacío.
    3. Ningún delimitador contiene dígitos.

    Los duplicados son inofensivos y se conservan. El orden importa: al
    dividir, en cada posición gana el primer delimitador que coincide.
    """

    delimiters: tuple[str, ...] = DEFAULT_DELIMITERS

    def __post_init__(self):
        """Validación de invariantes al instanciar."""
        # Aceptamos cualquier iterable (listas incluidas) y lo congelamos
        object.__setattr__(self, "delimiters", tuple(self.delimiters))

        if not self.delimiters:
            raise ValueError("El conjunto de delimitadores no puede estar vacío.")
        for delimiter in self.delimiters:
            if not isinstance(delimiter, str) or not delimiter:
                raise ValueError(f"Delimitador inválido (vacío): {delimiter!r}")
            # isdecimal() coincide con `\d` del patrón de cabecera (categoría Nd)
            if any(char.isdecimal() for char in delimiter):
                raise ValueError(f"Un delimitador no puede contener dígitos: {delimiter!r}")

    @classmethod
    def default(cls) -> DelimiterSet:
        return cls(DEFAULT_DELIMITERS)

    @classmethod
    def of(cls, delimiters: Iterable[str] | DelimiterSet) -> DelimiterSet:
        """Factory tolerante: acepta un DelimiterSet existente o cualquier iterable."""
        if isinstance(delimiters, DelimiterSet):
            return delimiters
        return cls(tuple(delimiters))

    def __iter__(self) -> Iterator[str]:
        return iter(self.delimiters)

    def __len__(self) -> int:
        return len(self.delimiters)

    def bounds(self, text: str) -> bool:
        """Indica si el texto empieza o termina con algún delimitador."""
        return any(text.startswith(d) or text.endswith(d) for d in self.delimiters)

    def match_at(self, text: str, index: int) -> str | None:
        """Retorna el primer delimitador (en orden declarado) presente en `index`."""
        for delimiter in self.delimiters:
            if text.startswith(delimiter, index):
                return delimiter
        return None
