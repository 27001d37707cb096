from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from .fields import display_identifier
from .validators import is_cnpj, is_cpf, is_cpf_or_cnpj, normalize


class IdentifierField(serializers.CharField):
    """Recebe CPF/CNPJ com ou sem pontuação, grava só dígitos e devolve formatado."""

    check = None

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        if not self.check(value):
            self.fail("invalid")
        return normalize(value)

    def to_representation(self, value):
        return display_identifier(super().to_representation(value))


class CPFField(IdentifierField):
    default_error_messages = {"invalid": _("CPF inválido.")}
    check = staticmethod(is_cpf)


class CNPJField(IdentifierField):
    default_error_messages = {"invalid": _("CNPJ inválido.")}
    check = staticmethod(is_cnpj)


class CPFOrCNPJField(IdentifierField):
    default_error_messages = {"invalid": _("CPF ou CNPJ inválido.")}
    check = staticmethod(is_cpf_or_cnpj)
