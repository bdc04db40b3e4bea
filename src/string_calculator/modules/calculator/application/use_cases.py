# src/string_calculator/modules/calculator/application/use_cases.py
"""
Casos de Uso de la Calculadora.

Arquitectura: Application Layer
Responsabilidad: Exponer `add` como caso de uso instrumentado (latencia, RAM,
resultado) sin alterar su contrato.
"""
from __future__ import annotations

from collections.abc import Iterable

from string_calculator.core.result import Result
from string_calculator.modules.calculator.domain.calculator import add
from string_calculator.modules.calculator.domain.errors import AddError
from string_calculator.modules.calculator.domain.value_objects import (
    DEFAULT_DELIMITERS,
    DelimiterSet,
)

# ✅ Import de Infraestructura (Observabilidad)
from string_calculator.modules.calculator.infrastructure.observability import (
    ObservabilityService,
)


class CalculateSum:
    """
    Caso de Uso: Sumar una cadena de números delimitados.

    Colaboradores:
    - delimiters: delimitadores por defecto para esta instancia (inyectables).
    """

    def __init__(self, delimiters: Iterable[str] | DelimiterSet = DEFAULT_DELIMITERS):
        # Validamos una sola vez al construir (Fail Fast)
        self._delimiters = DelimiterSet.of(delimiters)

    @property
    def delimiters(self) -> DelimiterSet:
        return self._delimiters

    # ✅ Instrumentación: Medimos "Latency" y "Errors" automáticamente
    @ObservabilityService.measure_latency(operation_name="calculate_sum_use_case")
    def execute(
        self, numbers: str, delimiters: Iterable[str] | DelimiterSet | None = None
    ) -> Result[int, AddError]:
        """
        Ejecuta la suma sobre la entrada indicada.

        Args:
            numbers: Texto de entrada.
            delimiters: Override puntual; si es None se usan los de la instancia.

        Returns:
            Ok(suma) o Err(AddError). Los errores de dominio NO se lanzan.
        """
        effective = self._delimiters if delimiters is None else DelimiterSet.of(delimiters)
        return add(numbers, effective)
