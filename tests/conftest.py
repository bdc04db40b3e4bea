# tests/conftest.py
import logging

import pytest


@pytest.fixture(autouse=True)
def reset_calculator_logger():
    """
    configure_logging() ata handlers a los streams capturados por pytest.
    Se restauran después de cada test para no escribir en streams cerrados.
    """
    yield
    calculator_logger = logging.getLogger("string_calculator")
    for handler in list(calculator_logger.handlers):
        handler.close()
        calculator_logger.removeHandler(handler)
    calculator_logger.addHandler(logging.NullHandler())
    calculator_logger.propagate = True
