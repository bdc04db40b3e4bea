# tests/modules/calculator/application/test_calculate_sum.py
"""
Tests para: CalculateSum (Use Case)
Tipo: Unitario (Application)
"""
import json
from unittest.mock import patch

import pytest

from string_calculator.core.result import Err, Ok
from string_calculator.modules.calculator.application.use_cases import CalculateSum
from string_calculator.modules.calculator.domain.errors import NegativeIntegers
from string_calculator.modules.calculator.domain.value_objects import DelimiterSet

# === Fixtures ===


@pytest.fixture
def use_case():
    """Caso de uso con delimitadores por defecto."""
    return CalculateSum()


# === Casos de Prueba ===


def test_execute_returns_sum(use_case):
    """
    Given: Una entrada válida
    When: Se ejecuta el caso de uso
    Then: Retorna Ok con la suma
    """
    assert use_case.execute("1,2\n3") == Ok(6)


def test_execute_returns_domain_errors_as_values(use_case):
    """Los errores de dominio no se lanzan: se retornan como Err."""
    assert use_case.execute("-1,-2") == Err(NegativeIntegers([-1, -2]))


def test_instance_delimiters_are_used():
    use_case = CalculateSum(["|"])

    assert use_case.delimiters == DelimiterSet(["|"])
    assert use_case.execute("1|2") == Ok(3)


def test_per_call_override(use_case):
    assert use_case.execute("1;2", delimiters=[";"]) == Ok(3)


def test_invalid_delimiters_fail_fast_on_construction():
    with pytest.raises(ValueError):
        CalculateSum(["1"])


@patch("string_calculator.modules.calculator.infrastructure.observability.logger")
def test_rejected_input_is_logged_as_warning(mock_logger, use_case):
    """
    Given: Una entrada con negativos
    When: Se ejecuta el caso de uso instrumentado
    Then: El evento .completed lleva status=rejected y el tipo de error
    """
    # Act
    use_case.execute("-1")

    # Assert
    mock_logger.warning.assert_called_once()
    log_json = json.loads(mock_logger.warning.call_args[0][0])
    assert log_json["event"] == "calculate_sum_use_case.completed"
    assert log_json["data"]["status"] == "rejected"
    assert log_json["data"]["error_kind"] == "negative_integers"
