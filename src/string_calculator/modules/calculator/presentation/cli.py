# src/string_calculator/modules/calculator/presentation/cli.py
"""
Interfaz de Línea de Comandos (CLI) para la Calculadora.

Arquitectura: Presentation Layer (Interface Adapter)
Responsabilidad:
    1. Parsear argumentos (argv).
    2. Instanciar el Composition Root.
    3. Formatear la salida (JSON/Texto).

Códigos de salida:
    0   → suma calculada
    1   → no se pudo leer la entrada
    2   → error de dominio (AddError)
    3   → error inesperado (bug)
    130 → cancelado por el usuario
"""

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from string_calculator.core.result import Err, Result
from string_calculator.modules.calculator.application.use_cases import CalculateSum
from string_calculator.modules.calculator.domain.errors import AddError
from string_calculator.modules.calculator.domain.value_objects import DEFAULT_DELIMITERS
from string_calculator.modules.calculator.infrastructure.observability import (
    configure_logging,
)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_DOMAIN_ERROR = 2
EXIT_UNEXPECTED = 3
EXIT_INTERRUPTED = 130


def setup_parser() -> argparse.ArgumentParser:
    """Configura los argumentos aceptados por la herramienta."""
    parser = argparse.ArgumentParser(
        prog="string-calculator",
        description="➕ String Calculator - Suma de números delimitados",
        epilog='Ejemplo: string-calculator --escapes "//[***]\\n1***2***3"',
    )

    parser.add_argument(
        "numbers",
        nargs="?",
        default=None,
        help="Números a sumar. Use '-' u omítalo para leer de stdin.",
    )

    parser.add_argument(
        "--file",
        "-f",
        type=Path,
        default=None,
        help="Leer la entrada desde un archivo de texto (UTF-8)",
    )

    parser.add_argument(
        "--delimiter",
        "-d",
        action="append",
        dest="delimiters",
        default=None,
        help="Delimitador literal (repetible). Reemplaza a ',' y salto de línea.",
    )

    parser.add_argument(
        "--escapes",
        "-e",
        action="store_true",
        help=(
            "Interpretar la secuencia '\\n' como salto de línea. Se reemplazan TODAS "
            "las apariciones: con este flag no es posible pasar un '\\n' literal"
        ),
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Salida en formato JSON (útil para tuberías/pipes)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Muestra logs detallados (nivel DEBUG)",
    )

    parser.add_argument(
        "--log-file",
        default=None,
        help="Archivo donde persistir los logs estructurados",
    )

    return parser


def read_input(args: argparse.Namespace) -> str:
    """Resuelve la fuente de la entrada: archivo, argumento o stdin."""
    if args.file is not None:
        text = args.file.read_text(encoding="utf-8")
    elif args.numbers is None or args.numbers == "-":
        text = sys.stdin.read()
    else:
        text = args.numbers

    if args.escapes:
        text = text.replace("\\n", "\n")
    return text


def format_output_text(console: Console, total: int) -> None:
    """Presentación amigable para humanos."""
    console.print(f"[bold green]✅ Suma:[/bold green] {total}")


def format_error_text(console: Console, error: AddError) -> None:
    table = Table(title="❌ Entrada rechazada", show_header=True)
    table.add_column("Error")
    table.add_column("Valores")
    values = ", ".join(repr(v) for v in error.payload()) or "-"
    table.add_row(error.kind, escape(values))
    console.print(table)
    console.print(escape(error.describe()))


def format_output_json(result: Result[int, AddError]) -> str:
    """Presentación para máquinas (Machine Readable)."""
    if isinstance(result, Err):
        error = result.error
        data = {
            "ok": False,
            "error": error.kind,
            "values": error.payload(),
            "message": error.describe(),
        }
    else:
        data = {"ok": True, "sum": result.value}
    return json.dumps(data)


def main(argv: list[str] | None = None) -> int:
    parser = setup_parser()
    args = parser.parse_args(argv)

    configure_logging(level="DEBUG" if args.verbose else None, log_file=args.log_file)

    out = Console()
    err = Console(stderr=True)

    # 1. Lectura de la entrada
    try:
        numbers = read_input(args)
    except (OSError, UnicodeDecodeError) as e:
        err.print(f"❌ Error: no se pudo leer la entrada: {escape(str(e))}")
        return EXIT_INPUT_ERROR

    # 2. Composition Root (Wiring)
    try:
        use_case = CalculateSum(args.delimiters or DEFAULT_DELIMITERS)
    except ValueError as e:
        # Delimitadores inválidos pasados por flag
        err.print(f"❌ Error de configuración: {escape(str(e))}")
        return EXIT_INPUT_ERROR

    # 3. Ejecución
    try:
        result = use_case.execute(numbers)
    except KeyboardInterrupt:
        err.print("\n⚠️  Operación cancelada por el usuario.")
        return EXIT_INTERRUPTED
    except Exception as e:
        # Errores inesperados (Bugs)
        err.print(f"❌ Error Crítico: {escape(str(e))}")
        return EXIT_UNEXPECTED

    # 4. Renderizado (Output)
    if args.json:
        print(format_output_json(result))
    elif isinstance(result, Err):
        format_error_text(err, result.error)
    else:
        format_output_text(out, result.value)

    return EXIT_DOMAIN_ERROR if isinstance(result, Err) else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
