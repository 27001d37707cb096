from django import template

from brazil.formatting import FormatError, format_cnpj, format_cpf

register = template.Library()


@register.filter
def cpf(value):
    """Formata um CPF salvo só com dígitos; devolve o valor original se não der."""
    if value is None or value == "":
        return ""
    try:
        return format_cpf(str(value))
    except (FormatError, OverflowError):
        return value


@register.filter
def cnpj(value):
    if value is None or value == "":
        return ""
    try:
        return format_cnpj(str(value))
    except (FormatError, OverflowError):
        return value
