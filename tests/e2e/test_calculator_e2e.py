# tests/e2e/test_calculator_e2e.py
"""
Tests End-to-End (E2E) para la Calculadora.
Objetivo: Validar el stack completo (CLI → Caso de Uso → Dominio → Logs)
en un proceso real.
"""

import json

# === Escenarios E2E ===


def test_header_from_stdin(run_cli):
    """
    Escenario: La entrada (con cabecera multi-delimitador) llega por stdin.
    Validación: Suma correcta en JSON y código 0.
    """
    result = run_cli("--json", stdin="//[***][%]\n1***2%3")

    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout) == {"ok": True, "sum": 6}


def test_domain_error_exit_code(run_cli):
    """
    Escenario: Entrada con varios negativos.
    Validación: Todos los negativos se reportan y el código de salida es 2.
    """
    result = run_cli("--json", "4,-1,-3,-1")

    assert result.returncode == 2
    data = json.loads(result.stdout)
    assert data["error"] == "negative_integers"
    assert data["values"] == [-1, -3, -1]


def test_structured_logs_on_stderr(run_cli):
    """
    Escenario: Ejecución normal.
    Validación: stderr contiene eventos JSON con el mismo correlation_id
    y sin la entrada cruda.
    """
    result = run_cli("--json", "7,8", env={"LOG_LEVEL": "INFO", "LOG_FORMAT": "JSON"})

    events = [json.loads(line) for line in result.stderr.splitlines() if line.startswith("{")]
    names = [e["event"] for e in events]
    assert names == ["calculate_sum_use_case.started", "calculate_sum_use_case.completed"]
    assert len({e["correlation_id"] for e in events}) == 1
    assert "7,8" not in result.stderr


def test_log_file_is_written(run_cli, tmp_path):
    log_file = tmp_path / "calc.log"

    result = run_cli("--json", "--log-file", str(log_file), "1")

    assert result.returncode == 0
    assert "calculate_sum_use_case.completed" in log_file.read_text(encoding="utf-8")
