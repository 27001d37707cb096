"""Regras de complexidade de senha.

Podem ser usadas em ``AUTH_PASSWORD_VALIDATORS`` (protocolo ``validate`` /
``get_help_text`` do Django) ou como validadores de campo.
"""
from __future__ import annotations

import re

from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.utils.deconstruct import deconstructible
from django.utils.translation import gettext_lazy as _
from django.utils.translation import ngettext

from .rules import has_value


@deconstructible
class PasswordComplexityValidator:
    pattern = None
    code = "password_too_simple"

    default_label = _("A senha")

    def __init__(self, min_occurrences: int = 1, label=None):
        self.min_occurrences = min_occurrences
        # nome do campo exibido na mensagem
        self.label = label if label is not None else self.default_label

    def ensure_legal_min_occurrences(self) -> None:
        # -1 desliga a regra; 0 e valores menores que -1 são erro de configuração
        if self.min_occurrences == 0 or self.min_occurrences < -1:
            raise ImproperlyConfigured(
                f"{type(self).__name__}: valor inválido para min_occurrences ({self.min_occurrences})."
            )

    def count(self, password: str) -> int:
        return len(re.findall(self.pattern, password))

    def get_error_message(self) -> str:
        raise NotImplementedError

    def validate(self, password, user=None) -> None:
        self.ensure_legal_min_occurrences()
        if not has_value(password):
            return
        if self.count(password) < self.min_occurrences:
            raise ValidationError(
                self.get_error_message(),
                code=self.code,
                params=self.get_message_params(),
            )

    def __call__(self, value) -> None:
        self.validate(value)

    def get_message_params(self) -> dict:
        return {"field": self.label, "min_occurrences": self.min_occurrences}

    def get_help_text(self) -> str:
        return self.get_error_message() % self.get_message_params()

    def __eq__(self, other):
        return (
            isinstance(other, self.__class__)
            and self.min_occurrences == other.min_occurrences
            and self.label == other.label
        )


class CapitalLettersValidator(PasswordComplexityValidator):
    pattern = r"[A-Z]"
    code = "password_too_few_capital_letters"

    def get_error_message(self) -> str:
        return ngettext(
            "%(field)s deve conter pelo menos %(min_occurrences)d letra maiúscula.",
            "%(field)s deve conter pelo menos %(min_occurrences)d letras maiúsculas.",
            self.min_occurrences,
        )


class LowerCaseLettersValidator(PasswordComplexityValidator):
    pattern = r"[a-z]"
    code = "password_too_few_lower_case_letters"

    def get_error_message(self) -> str:
        return ngettext(
            "%(field)s deve conter pelo menos %(min_occurrences)d letra minúscula.",
            "%(field)s deve conter pelo menos %(min_occurrences)d letras minúsculas.",
            self.min_occurrences,
        )


class DigitsValidator(PasswordComplexityValidator):
    pattern = r"[0-9]"
    code = "password_too_few_digits"

    def get_error_message(self) -> str:
        return ngettext(
            "%(field)s deve conter pelo menos %(min_occurrences)d dígito.",
            "%(field)s deve conter pelo menos %(min_occurrences)d dígitos.",
            self.min_occurrences,
        )
