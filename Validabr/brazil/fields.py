from django import forms

from .formatting import format_cnpj, format_cpf
from .validators import (
    CNPJ_LENGTH,
    CPF_LENGTH,
    CNPJValidator,
    CPFOrCNPJValidator,
    CPFValidator,
    normalize,
)


def display_identifier(value):
    """Exibe CPF/CNPJ só de dígitos já pontuado; outros valores ficam como estão."""
    if isinstance(value, str) and value.isascii() and value.isdigit():
        if len(value) == CPF_LENGTH:
            return format_cpf(value)
        if len(value) == CNPJ_LENGTH:
            return format_cnpj(value)
    return value


class IdentifierField(forms.CharField):
    """Campo texto que aceita pontuação e entrega apenas os dígitos."""

    placeholder = ""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.placeholder:
            self.widget.attrs.setdefault("placeholder", self.placeholder)

    def clean(self, value):
        value = super().clean(value)
        if value in self.empty_values:
            return value
        return normalize(value)

    def prepare_value(self, value):
        return display_identifier(value)


class CPFField(IdentifierField):
    default_validators = [CPFValidator()]
    placeholder = "000.000.000-00"


class CNPJField(IdentifierField):
    default_validators = [CNPJValidator()]
    placeholder = "00.000.000/0000-00"


class CPFOrCNPJField(IdentifierField):
    default_validators = [CPFOrCNPJValidator()]
    placeholder = "CPF ou CNPJ"
