# src/string_calculator/modules/calculator/infrastructure/observability.py
"""
Servicio de Observabilidad SRE: Logs, Latency & Saturation (RAM).

Principios:
1. Logs estructurados (JSON) para máquinas.
2. Modo "Pretty Print" para depuración visual (LOG_FORMAT=PRETTY).
3. Contexto (correlation_id) en cada evento.
4. Nunca se loguea la entrada cruda, solo su tamaño.
"""

from __future__ import annotations

import functools
import json
import logging
import os
import sys
import time
import uuid
from typing import Any, Callable

import psutil

from string_calculator.core.result import Err

logger = logging.getLogger("string_calculator")
# Silencioso hasta que la aplicación llame a configure_logging()
logger.addHandler(logging.NullHandler())

DEFAULT_LOG_LEVEL = "INFO"


def configure_logging(level: int | str | None = None, log_file: str | None = None) -> None:
    """
    Configura el logging con destino Consola (y opcionalmente Archivo).

    Args:
        level: Nivel para consola. Si es None se lee LOG_LEVEL (default INFO).
        log_file: Si se indica, se agrega un handler de archivo en modo DEBUG.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    # Consola: solo el mensaje (ya es JSON)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler.setLevel(level)

    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Limpiar handlers previos para evitar duplicados
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.addHandler(console_handler)

    if log_file:
        # Formateador detallado para archivo (Forensics)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
            )
        )
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    logger.debug(f"Observabilidad iniciada (level={level}, log_file={log_file})")


class ObservabilityService:

    # 🌍 CONFIGURACIÓN GLOBAL
    # Si esta variable de entorno existe, activamos la vista vertical
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except psutil.Error:
            return 0.0

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON (Horizontal o Vertical)."""

        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4)
        else:
            msg = json.dumps(log_entry)

        if level == "ERROR":
            logger.error(msg)
        elif level == "WARNING":
            logger.warning(msg)
        else:
            logger.info(msg)

    @staticmethod
    def _describe_target(args: tuple) -> dict[str, Any]:
        """Contexto del primer argumento de texto (tamaño, nunca contenido)."""
        for arg in args:
            if isinstance(arg, str):
                return {"input_chars": len(arg), "input_lines": arg.count("\n") + 1}
        return {"input_chars": None, "input_lines": None}

    @staticmethod
    def measure_latency(operation_name: str):
        """
        Decorador que registra inicio, fin y errores de una operación.

        Si la función retorna un Err, el evento `.completed` lleva
        status="rejected" y el tipo de error de dominio (no es un crash).
        Si lanza una excepción, se emite `.failed` y se relanza.
        """

        def decorator(func: Callable):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.time()
                start_ram = ObservabilityService._get_ram_usage_mb()
                correlation_id = ObservabilityService.get_correlation_id()
                target = ObservabilityService._describe_target(args)

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={**target, "start_ram_mb": start_ram},
                )

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    crash_ram = ObservabilityService._get_ram_usage_mb()

                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(time.time() - start_time, 3),
                            "crash_ram_mb": crash_ram,
                            **target,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

                end_ram = ObservabilityService._get_ram_usage_mb()
                payload = {
                    "duration_sec": round(time.time() - start_time, 3),
                    "end_ram_mb": end_ram,
                    "ram_delta_mb": round(end_ram - start_ram, 2),
                    **target,
                    "status": "success",
                }
                if isinstance(result, Err):
                    payload["status"] = "rejected"
                    payload["error_kind"] = getattr(result.error, "kind", type(result.error).__name__)

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.completed",
                    correlation_id=correlation_id,
                    payload=payload,
                    level="WARNING" if isinstance(result, Err) else "INFO",
                )
                return result

            return wrapper

        return decorator
