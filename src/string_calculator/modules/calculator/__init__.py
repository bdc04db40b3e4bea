"""
Módulo de la Calculadora de Cadenas.
"""

from __future__ import annotations

# Application
from .application.use_cases import CalculateSum

# Domain
from .domain.calculator import add
from .domain.errors import (
    AddError,
    InvalidNumbers,
    NegativeIntegers,
    StartingOrEndingByDelimiter,
)
from .domain.header import HeaderMatch, extract_header
from .domain.tokenizer import check_structure, split_literal, tokenize
from .domain.validation import drop_above_limit, only_ints, only_positive_ints
from .domain.value_objects import DEFAULT_DELIMITERS, MAX_VALUE, DelimiterSet

# Infrastructure
from .infrastructure.observability import ObservabilityService, configure_logging

__all__ = [
    "add",
    "AddError",
    "InvalidNumbers",
    "NegativeIntegers",
    "StartingOrEndingByDelimiter",
    "DelimiterSet",
    "DEFAULT_DELIMITERS",
    "MAX_VALUE",
    "HeaderMatch",
    "extract_header",
    "check_structure",
    "split_literal",
    "tokenize",
    "only_ints",
    "only_positive_ints",
    "drop_above_limit",
    "CalculateSum",
    "ObservabilityService",
    "configure_logging",
]
