"""Validación del status HTTP."""

from __future__ import annotations

SUCCESS_MIN = 200
# Inclusivo: un 300 cuenta como éxito (comportamiento histórico del cliente).
SUCCESS_MAX = 300


def is_success(code: int) -> bool:
    return SUCCESS_MIN <= code <= SUCCESS_MAX
