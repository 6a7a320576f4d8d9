from __future__ import annotations

from ..core.exceptions import ValidationError


def require_min_length(value: str, message: str, min_len: int) -> str:
    if value is None or len(value.strip()) < min_len:
        raise ValidationError(message)
    return value.strip()


def require_pin(value: str, length: int) -> str:
    pin = (value or "").strip()
    if len(pin) != length or not pin.isdigit():
        raise ValidationError(f"El PIN ha de tenir {length} xifres")
    return pin
