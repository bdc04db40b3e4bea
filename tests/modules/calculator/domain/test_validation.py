# tests/modules/calculator/domain/test_validation.py
"""
Tests para: parse_int, only_ints, only_positive_ints, drop_above_limit
Tipo: Unitario (Domain)
Enfoque: Las pasadas acumulan TODOS los fallos, no solo el primero.
"""
import pytest

from string_calculator.core.result import Err, Ok
from string_calculator.modules.calculator.domain.errors import InvalidNumbers, NegativeIntegers
from string_calculator.modules.calculator.domain.validation import (
    drop_above_limit,
    only_ints,
    only_positive_ints,
    parse_int,
)

# === parse_int ===


@pytest.mark.parametrize(
    "token, expected",
    [("0", 0), ("42", 42), ("-7", -7), ("+5", 5), ("007", 7), ("2147483647", 2147483647)],
)
def test_parse_int_accepts_signed_integers(token, expected):
    assert parse_int(token) == expected


@pytest.mark.parametrize(
    "token", ["", "x", "1.5", "1_000", "--1", "1 2", "٣", "2147483648", "-2147483649"]
)
def test_parse_int_rejects_everything_else(token):
    """Vacíos, decimales, separadores, dígitos Unicode y valores fuera de 32 bits."""
    assert parse_int(token) is None


# === only_ints ===


def test_only_ints_success():
    assert only_ints(["1", "-2", "3"]) == Ok([1, -2, 3])


def test_only_ints_accumulates_every_invalid_token_in_order():
    """
    Given: Varios tokens inválidos mezclados con válidos
    When: Se valida la secuencia
    Then: Se reportan todos los inválidos, en orden de aparición
    """
    assert only_ints(["x", "1", "y", "", "x"]) == Err(InvalidNumbers(["x", "y", "", "x"]))


# === only_positive_ints ===


def test_only_positive_ints_accumulates_duplicates():
    assert only_positive_ints([-1, 2, -3, -1]) == Err(NegativeIntegers([-1, -3, -1]))


def test_zero_is_not_negative():
    assert only_positive_ints([0, 5]) == Ok([0, 5])


# === drop_above_limit ===


def test_drop_above_limit_keeps_boundary():
    assert drop_above_limit([1000, 1001, 2, 5000]) == [1000, 2]
    assert drop_above_limit([10, 11], limit=10) == [10]
