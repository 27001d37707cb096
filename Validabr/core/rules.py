from __future__ import annotations

import logging
from collections.abc import Mapping

from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible
from django.utils.translation import gettext_lazy as _

from .validators import is_email

logger = logging.getLogger(__name__)


def has_value(value) -> bool:
    # Somente strings não vazias são avaliadas; obrigatoriedade é outra regra
    return isinstance(value, str) and bool(value.strip())


@deconstructible
class StringValueValidator:
    """Regra base para campos texto.

    Valores ausentes ou em branco passam sem erro. Subclasses definem
    ``predicate`` (função que recebe o texto e retorna bool).
    """

    predicate = None
    message = _("Valor inválido.")
    code = "invalid"

    def __init__(self, message=None, code=None):
        if message is not None:
            self.message = message
        if code is not None:
            self.code = code

    def __call__(self, value):
        if not has_value(value):
            return
        if not self.predicate(value):
            raise ValidationError(self.message, code=self.code, params={"value": value})

    def __eq__(self, other):
        return (
            isinstance(other, self.__class__)
            and self.message == other.message
            and self.code == other.code
        )


class EmailAddressValidator(StringValueValidator):
    predicate = staticmethod(is_email)
    message = _("Informe um e-mail válido.")
    code = "invalid_email"


def _field_value(obj, field_name):
    if isinstance(obj, Mapping):
        return obj.get(field_name)
    return getattr(obj, field_name, None)


def validate_object(obj, rules) -> list[str] | None:
    """Aplica uma tabela de regras ``{campo: [validadores]}`` ao objeto.

    Retorna a lista de mensagens de erro, ou ``None`` se todas passarem.
    """
    if obj is None:
        raise ValueError("obj é obrigatório.")
    errors: list[str] = []
    for field_name, validators in rules.items():
        value = _field_value(obj, field_name)
        for validator in validators:
            try:
                validator(value)
            except ValidationError as exc:
                logger.debug("Campo %s reprovado: %s", field_name, exc.messages)
                errors.extend(exc.messages)
    return errors or None
