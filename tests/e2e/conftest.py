# tests/e2e/conftest.py
import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


@pytest.fixture
def run_cli():
    """
    Factory que ejecuta la CLI en un proceso real (python -m ...).
    Permite validar códigos de salida y streams sin mocks.
    """

    def _run(*args: str, stdin: str | None = None, env: dict | None = None):
        process_env = {**os.environ, **(env or {})}
        process_env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(SRC_DIR), process_env.get("PYTHONPATH")])
        )
        return subprocess.run(
            [sys.executable, "-m", "string_calculator.modules.calculator.presentation.cli", *args],
            input=stdin,
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=process_env,
            timeout=60,
        )

    return _run
