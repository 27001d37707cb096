"""Liga serializers do Django REST framework a um ``EditContext``.

Os erros do serializer (inclusive de serializers aninhados) viram mensagens
no ``ValidationMessageStore``, associadas ao ``FieldIdentifier`` do objeto
que realmente contém o campo.
"""
from __future__ import annotations

import logging
from collections import namedtuple
from collections.abc import Mapping

from rest_framework.settings import api_settings

from .context import EditContext, FieldIdentifier, ValidationMessageStore

logger = logging.getLogger(__name__)

ValidationFailure = namedtuple("ValidationFailure", ["property_name", "error_message"])


class ValidationResult:
    def __init__(self, errors):
        self.errors = list(errors)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def as_data(value):
    """Converte o modelo (objeto, dict ou lista) no formato que o serializer recebe."""
    if isinstance(value, Mapping):
        return {key: as_data(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [as_data(item) for item in value]
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return {
            key: as_data(item)
            for key, item in vars(value).items()
            if not key.startswith("_")
        }
    return value


def flatten_errors(errors, prefix: str = "") -> list[ValidationFailure]:
    """Achata ``serializer.errors`` em falhas com caminho pontuado (``address.city``)."""
    failures = []
    if isinstance(errors, Mapping):
        for key, value in errors.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            failures.extend(flatten_errors(value, path))
    elif isinstance(errors, (list, tuple)):
        for index, item in enumerate(errors):
            if isinstance(item, (Mapping, list, tuple)):
                path = f"{prefix}.{index}" if prefix else str(index)
                failures.extend(flatten_errors(item, path))
            else:
                failures.append(ValidationFailure(prefix, str(item)))
    else:
        failures.append(ValidationFailure(prefix, str(errors)))
    return failures


def _resolve(obj, part: str):
    if isinstance(obj, Mapping):
        return obj.get(part)
    if isinstance(obj, (list, tuple)):
        if part.isdigit() and int(part) < len(obj):
            return obj[int(part)]
        return None
    return getattr(obj, part, None)


def to_field_identifier(edit_context: EditContext, property_path: str) -> FieldIdentifier:
    """Converte ``address.city`` no ``FieldIdentifier`` do objeto ``address``.

    Erros gerais (``non_field_errors``) ficam no modelo com nome vazio. Se o
    caminho não puder ser percorrido o erro fica no modelo raiz.
    """
    model = edit_context.model
    parts = property_path.split(".")
    if parts[-1] == api_settings.NON_FIELD_ERRORS_KEY:
        parts[-1] = ""
    if len(parts) == 1:
        return FieldIdentifier(model, parts[0])

    current = model
    for part in parts[:-1]:
        current = _resolve(current, part)
        if current is None:
            return FieldIdentifier(model, property_path)
    return FieldIdentifier(current, parts[-1])


def run_serializer(serializer_class, model, context=None) -> ValidationResult:
    serializer = serializer_class(data=as_data(model), context=context or {})
    if serializer.is_valid():
        return ValidationResult([])
    return ValidationResult(flatten_errors(serializer.errors))


class SerializerValidation:
    """Valida ``model`` com ``serializer_class`` e publica os erros no ``edit_context``.

    Com ``auto_validation_on_requested`` responde a ``EditContext.validate()``;
    com ``auto_validation_on_field_changed`` revalida cada campo alterado.
    """

    def __init__(
        self,
        model,
        serializer_class,
        edit_context: EditContext,
        auto_validation_on_requested: bool = True,
        auto_validation_on_field_changed: bool = True,
        highlight_invalid_fields: bool = True,
        serializer_context=None,
    ):
        self.model = model
        self.serializer_class = serializer_class
        self.edit_context = edit_context
        self.serializer_context = serializer_context
        self.message_store = ValidationMessageStore(edit_context)

        if auto_validation_on_requested:
            edit_context.on_validation_requested.append(lambda context: self.validate())
        if auto_validation_on_field_changed:
            edit_context.on_field_changed.append(lambda context, field: self.validate_field(field))
        if highlight_invalid_fields:
            edit_context.notify_validation_state_changed()

    def _run(self) -> ValidationResult:
        result = run_serializer(self.serializer_class, self.model, self.serializer_context)
        logger.debug(
            "%s: %d erro(s) de validação", self.serializer_class.__name__, len(result.errors)
        )
        return result

    def validate(self, highlight_invalid_fields: bool = True) -> ValidationResult:
        result = self._run()
        self.message_store.clear()
        for failure in result.errors:
            field = to_field_identifier(self.edit_context, failure.property_name)
            self.message_store.add(field, failure.error_message)
        if highlight_invalid_fields:
            self.edit_context.notify_validation_state_changed()
        return result

    def validate_field(self, field_identifier: FieldIdentifier, highlight_invalid_field: bool = True) -> None:
        result = self._run()
        self.message_store.clear(field_identifier)
        for failure in result.errors:
            if to_field_identifier(self.edit_context, failure.property_name) == field_identifier:
                self.message_store.add(field_identifier, failure.error_message)
        if highlight_invalid_field:
            self.edit_context.notify_validation_state_changed()


class PropertyValidatorMixin:
    """Mixin para serializers: valida uma única propriedade do modelo.

        class ContatoSerializer(PropertyValidatorMixin, serializers.Serializer):
            email = serializers.EmailField()

        ContatoSerializer.validate_property(contato, "email")  # -> ["..."] ou []
    """

    @classmethod
    def validate_property(cls, model, property_name: str) -> list[str]:
        result = run_serializer(cls, model)
        return [
            failure.error_message
            for failure in result.errors
            if failure.property_name == property_name
        ]
