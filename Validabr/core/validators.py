from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from django.utils.formats import sanitize_separators

from .patterns import BASE64_CONTENT, BASE64_DATAURI, EMAIL_ADDRESS

INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)
INT64_DIGITS = len(str(2**63))

_EMAIL_RE = re.compile(EMAIL_ADDRESS, re.IGNORECASE)
_BASE64_RE = re.compile(BASE64_CONTENT)
_DATAURI_RE = re.compile(BASE64_DATAURI)
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def has_numbers_only(value: str) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return all("0" <= ch <= "9" for ch in value)


def _parse_integer(value, bounds) -> int | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    sign = "-" if text.startswith("-") else ""
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > INT64_DIGITS:
        return None
    number = int(sign + digits)
    low, high = bounds
    if number < low or number > high:
        return None
    return number


def is_int_number(value: str, positive_only: bool = False) -> bool:
    """Verifica se o valor cabe em um inteiro de 32 bits.

    Com ``positive_only`` o zero ainda é aceito; apenas negativos falham.
    """
    number = _parse_integer(value, INT32_RANGE)
    if number is None:
        return False
    return number >= 0 if positive_only else True


def is_long_number(value: str, positive_only: bool = False) -> bool:
    number = _parse_integer(value, INT64_RANGE)
    if number is None:
        return False
    return number >= 0 if positive_only else True


def is_decimal_number(value: str, positive_only: bool = False) -> bool:
    """Verifica se o valor é um decimal finito no formato do idioma ativo."""
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        number = Decimal(sanitize_separators(value.strip()))
    except (InvalidOperation, ValueError):
        return False
    if not number.is_finite():
        return False
    return number >= 0 if positive_only else True


def is_email(value: str) -> bool:
    if not isinstance(value, str):
        return False
    return _EMAIL_RE.fullmatch(value) is not None


def is_base64(value: str) -> bool:
    if not isinstance(value, str):
        return False
    return _BASE64_RE.fullmatch(value) is not None


def parse_data_uri(value: str) -> dict | None:
    """Extrai tipo, extensão, codificação e conteúdo de um data URI Base64.

    Retorna ``None`` quando o valor não é um data URI válido.
    """
    if not isinstance(value, str):
        return None
    match = _DATAURI_RE.fullmatch(value)
    if match is None:
        return None
    return {
        "type": match.group("type"),
        "extension": match.group("extension"),
        "base": match.group("base"),
        "content": match.group("content"),
    }
