from __future__ import annotations

import re

from django.utils.translation import gettext_lazy as _

from core.patterns import MOBILE_NUMBER, ZIP_CODE
from core.rules import StringValueValidator

CPF_LENGTH = 11
CNPJ_LENGTH = 14

CPF_WEIGHTS = (
    (10, 9, 8, 7, 6, 5, 4, 3, 2),
    (11, 10, 9, 8, 7, 6, 5, 4, 3, 2),
)
CNPJ_WEIGHTS = (
    (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
    (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
)

_NON_DIGITS = re.compile(r"[^0-9]+")
_MOBILE_RE = re.compile(MOBILE_NUMBER)
_ZIP_CODE_RE = re.compile(ZIP_CODE)


def normalize(value: str) -> str:
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))


def _is_repdigit(digits: str) -> bool:
    return digits == digits[0] * len(digits)


def _check_digit(base: str, weights) -> str:
    total = sum(int(d) * w for d, w in zip(base, weights))
    remainder = total % 11
    return "0" if remainder < 2 else str(11 - remainder)


def _has_valid_check_digits(digits: str, weights) -> bool:
    first, second = weights
    base = digits[: len(first)]
    d1 = _check_digit(base, first)
    d2 = _check_digit(base + d1, second)
    return digits[-2:] == d1 + d2


def _is_cpf_digits(digits: str) -> bool:
    if len(digits) != CPF_LENGTH:
        return False
    # 000.000.000-00 .. 999.999.999-99 não são CPFs emitidos
    if _is_repdigit(digits):
        return False
    return _has_valid_check_digits(digits, CPF_WEIGHTS)


def _is_cnpj_digits(digits: str) -> bool:
    if len(digits) != CNPJ_LENGTH:
        return False
    if _is_repdigit(digits):
        return False
    return _has_valid_check_digits(digits, CNPJ_WEIGHTS)


def is_cpf(value: str) -> bool:
    return _is_cpf_digits(normalize(value))


def is_cnpj(value: str) -> bool:
    return _is_cnpj_digits(normalize(value))


def is_cpf_or_cnpj(value: str) -> bool:
    digits = normalize(value)
    if len(digits) == CPF_LENGTH:
        return _is_cpf_digits(digits)
    if len(digits) == CNPJ_LENGTH:
        return _is_cnpj_digits(digits)
    return False


def is_mobile_number(value: str) -> bool:
    """Celular brasileiro: DDD + 9 + oito dígitos, pontuação ignorada."""
    return _MOBILE_RE.fullmatch(normalize(value)) is not None


def is_zip_code_number(value: str) -> bool:
    """CEP no formato 00000-000 ou 00000000 (sem normalizar a entrada)."""
    if not isinstance(value, str):
        return False
    return _ZIP_CODE_RE.fullmatch(value) is not None


class CPFValidator(StringValueValidator):
    predicate = staticmethod(is_cpf)
    message = _("CPF inválido.")
    code = "invalid_cpf"


class CNPJValidator(StringValueValidator):
    predicate = staticmethod(is_cnpj)
    message = _("CNPJ inválido.")
    code = "invalid_cnpj"


class CPFOrCNPJValidator(StringValueValidator):
    predicate = staticmethod(is_cpf_or_cnpj)
    message = _("CPF ou CNPJ inválido.")
    code = "invalid_cpf_or_cnpj"


class MobileNumberValidator(StringValueValidator):
    predicate = staticmethod(is_mobile_number)
    message = _("Número de celular inválido.")
    code = "invalid_mobile_number"


class ZipCodeValidator(StringValueValidator):
    predicate = staticmethod(is_zip_code_number)
    message = _("CEP inválido.")
    code = "invalid_zip_code"
