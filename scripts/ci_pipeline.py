#!/usr/bin/env python3
"""
Pipeline de CI Local para el Proyecto String Calculator.
Ejecuta validaciones estáticas, tests unitarios (con propiedades Hypothesis)
y tests de integración/E2E.

Uso: python scripts/ci_pipeline.py [--fast]
    --fast  omite la etapa E2E (procesos reales)
"""

import subprocess
import sys
import time
from dataclasses import dataclass
from datetime import datetime


# Colores para la terminal
class Colors:
    HEADER = "\033[95m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


@dataclass(frozen=True)
class Stage:
    title: str
    command: str
    description: str
    blocking: bool = True
    slow: bool = False


STAGES = [
    Stage(
        "1. ANÁLISIS ESTÁTICO (RUFF)",
        "ruff check src/ tests/ scripts/",
        "Verificando estilo y errores comunes",
        blocking=False,
    ),
    Stage(
        "2. VERIFICACIÓN DE TIPOS (CORE + DOMINIO)",
        "mypy src/string_calculator/core src/string_calculator/modules/calculator/domain",
        "Validando contratos de Result y AddError",
    ),
    Stage(
        "3. TESTS UNITARIOS (CORE, DOMAIN & APP)",
        "pytest tests/core tests/modules/calculator/domain tests/modules/calculator/application -q",
        "Ejecutando lógica pura y propiedades",
    ),
    Stage(
        "4. TESTS INFRAESTRUCTURA & CLI",
        "pytest tests/modules/calculator/infrastructure tests/modules/calculator/presentation -q",
        "Validando logs estructurados y códigos de salida",
    ),
    Stage(
        "5. TESTS E2E (PROCESOS REALES)",
        "pytest tests/e2e -q",
        "Ejecutando la CLI como subproceso",
        slow=True,
    ),
]


def run_stage(stage: Stage) -> bool:
    print(f"\n{Colors.HEADER}=== EJECUTANDO: {stage.title} ==={Colors.ENDC}")
    print(f"⏳ {stage.description}...")
    start = time.time()
    result = subprocess.run(stage.command, shell=True, capture_output=True, text=True)
    duration = time.time() - start

    if result.returncode == 0:
        print(f"{Colors.OKGREEN}✅ PASÓ ({duration:.2f}s){Colors.ENDC}")
        return True

    print(f"{Colors.FAIL}❌ FALLÓ ({duration:.2f}s){Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDOUT ---\n{result.stdout}{Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDERR ---\n{result.stderr}{Colors.ENDC}")
    return False


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    fast = "--fast" in argv

    start_total = time.time()
    print(f"{Colors.BOLD}🚀 INICIANDO PIPELINE CI - STRING CALCULATOR{Colors.ENDC}")
    print(f"📅 Fecha: {datetime.now()}")

    for stage in STAGES:
        if fast and stage.slow:
            print(f"\n⏭️  Omitida (--fast): {stage.title}")
            continue
        if run_stage(stage):
            continue
        if stage.blocking:
            sys.exit(1)
        print(f"{Colors.WARNING}⚠️  No bloqueante: se continúa con la siguiente etapa{Colors.ENDC}")

    total_duration = time.time() - start_total
    print(f"\n{Colors.OKGREEN}{'=' * 50}{Colors.ENDC}")
    print(f"{Colors.OKGREEN}🎉  BUILD SUCCESSFUL{Colors.ENDC}")
    print(f"{Colors.OKGREEN}{'=' * 50}{Colors.ENDC}")
    print(f"⏱️ Tiempo Total: {total_duration:.2f}s")


if __name__ == "__main__":
    main()
