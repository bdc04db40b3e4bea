# tests/modules/calculator/domain/test_delimiter_set.py
"""
Tests para: DelimiterSet
Tipo: Unitario (Domain)
"""
import pytest

from string_calculator.modules.calculator.domain.value_objects import (
    DEFAULT_DELIMITERS,
    DelimiterSet,
)

# === Casos de Prueba ===


def test_default_delimiters_are_comma_and_newline():
    """
    Given: Ningún argumento
    When: Se instancia DelimiterSet
    Then: Usa ',' y salto de línea, en ese orden
    """
    assert DelimiterSet().delimiters == (",", "\n")
    assert DelimiterSet.default().delimiters == DEFAULT_DELIMITERS


def test_accepts_lists_and_keeps_duplicates():
    # Arrange & Act
    delimiters = DelimiterSet([";", ";", "***"])

    # Assert
    assert delimiters.delimiters == (";", ";", "***")
    assert len(delimiters) == 3


@pytest.mark.parametrize("invalid", [[], [""], ["a1"], [",", "9"]])
def test_rejects_invalid_delimiters(invalid):
    """
    Given: Un conjunto vacío, un delimitador vacío o con dígitos
    When: Se instancia DelimiterSet
    Then: Lanza ValueError (error de programación, no de dominio)
    """
    with pytest.raises(ValueError):
        DelimiterSet(invalid)


def test_of_reuses_existing_instance():
    original = DelimiterSet([";"])
    assert DelimiterSet.of(original) is original
    assert DelimiterSet.of(["%"]) == DelimiterSet(("%",))


def test_bounds_detects_leading_and_trailing_delimiters():
    delimiters = DelimiterSet(["**"])

    assert delimiters.bounds("**1") is True
    assert delimiters.bounds("1**") is True
    assert delimiters.bounds("1**2") is False
    assert delimiters.bounds("*1") is False


def test_match_at_prefers_declaration_order():
    delimiters = DelimiterSet(["*", "**"])

    # Gana el primero declarado aunque el segundo sea más largo
    assert delimiters.match_at("1**2", 1) == "*"
    assert delimiters.match_at("1**2", 0) is None


@pytest.mark.parametrize("delimiter", ["²", "①", "½"])
def test_digit_like_symbols_are_valid_delimiters(delimiter):
    """Solo los dígitos decimales (los que reconoce `\\d`) están prohibidos."""
    assert DelimiterSet([delimiter]).delimiters == (delimiter,)


def test_non_ascii_decimal_digits_are_rejected():
    with pytest.raises(ValueError):
        DelimiterSet(["٣"])
