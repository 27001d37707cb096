from __future__ import annotations

import re

UINT64_MAX = 2**64 - 1
UINT64_DIGITS = len(str(UINT64_MAX))

_DIGITS = re.compile(r"[0-9]+")


class FormatError(ValueError):
    pass


def parse_unsigned(value: str) -> int:
    """Converte uma string só de dígitos em inteiro sem sinal de 64 bits.

    Levanta ``FormatError`` para entrada vazia ou com caracteres não
    numéricos e ``OverflowError`` quando o número não cabe em 64 bits.
    """
    if not isinstance(value, str) or not _DIGITS.fullmatch(value):
        raise FormatError(f"Valor não numérico: {value!r}")
    # int() recusa strings muito longas, zeros à esquerda inclusive
    digits = value.lstrip("0") or "0"
    if len(digits) > UINT64_DIGITS:
        raise OverflowError(f"Valor excede o limite de 64 bits ({len(value)} dígitos).")
    number = int(digits)
    if number > UINT64_MAX:
        raise OverflowError(f"Valor excede o limite de 64 bits: {value}")
    return number


def format_cpf(value: str) -> str:
    """Formata um CPF como 000.000.000-00 (sem validar os dígitos)."""
    text = str(parse_unsigned(value)).zfill(11)
    return f"{text[:-8]}.{text[-8:-5]}.{text[-5:-2]}-{text[-2:]}"


def format_cnpj(value: str) -> str:
    """Formata um CNPJ como 00.000.000/0000-00 (sem validar os dígitos)."""
    text = str(parse_unsigned(value)).zfill(14)
    return f"{text[:-12]}.{text[-12:-9]}.{text[-9:-6]}/{text[-6:-2]}-{text[-2:]}"
