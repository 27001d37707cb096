"""Estado de formulário desacoplado de qualquer framework de interface.

``EditContext`` guarda o modelo editado, os campos alterados e dispara
callbacks; ``ValidationMessageStore`` guarda as mensagens de erro por campo.
"""
from __future__ import annotations


class FieldIdentifier:
    """Identifica um campo pelo objeto dono (por identidade) e pelo nome."""

    __slots__ = ("model", "field_name")

    def __init__(self, model, field_name: str):
        if model is None:
            raise ValueError("model é obrigatório.")
        self.model = model
        self.field_name = field_name

    def __eq__(self, other):
        if not isinstance(other, FieldIdentifier):
            return NotImplemented
        return self.model is other.model and self.field_name == other.field_name

    def __hash__(self):
        return hash((id(self.model), self.field_name))

    def __repr__(self) -> str:  # pragma: no cover
        return f"FieldIdentifier({type(self.model).__name__}, {self.field_name!r})"


class EditContext:
    def __init__(self, model):
        if model is None:
            raise ValueError("model é obrigatório.")
        self.model = model
        # callback(context, field_identifier)
        self.on_field_changed = []
        # callback(context)
        self.on_validation_requested = []
        self.on_validation_state_changed = []
        self._stores = []
        self._modified = set()

    def field(self, field_name: str) -> FieldIdentifier:
        return FieldIdentifier(self.model, field_name)

    def register_store(self, store: "ValidationMessageStore") -> None:
        self._stores.append(store)

    def notify_field_changed(self, field_identifier: FieldIdentifier) -> None:
        self._modified.add(field_identifier)
        for callback in list(self.on_field_changed):
            callback(self, field_identifier)

    def notify_validation_state_changed(self) -> None:
        for callback in list(self.on_validation_state_changed):
            callback(self)

    def validate(self) -> bool:
        """Pede validação aos interessados e informa se restou alguma mensagem."""
        for callback in list(self.on_validation_requested):
            callback(self)
        return not self.get_validation_messages()

    def get_validation_messages(self, field_identifier: FieldIdentifier | None = None) -> list[str]:
        messages: list[str] = []
        for store in self._stores:
            if field_identifier is None:
                messages.extend(store.all_messages())
            else:
                messages.extend(store[field_identifier])
        return messages

    def is_modified(self, field_identifier: FieldIdentifier | None = None) -> bool:
        if field_identifier is None:
            return bool(self._modified)
        return field_identifier in self._modified

    def mark_as_unmodified(self, field_identifier: FieldIdentifier | None = None) -> None:
        if field_identifier is None:
            self._modified.clear()
        else:
            self._modified.discard(field_identifier)


class ValidationMessageStore:
    def __init__(self, edit_context: EditContext):
        self.edit_context = edit_context
        self._messages: dict[FieldIdentifier, list[str]] = {}
        edit_context.register_store(self)

    def add(self, field_identifier: FieldIdentifier, message: str) -> None:
        self._messages.setdefault(field_identifier, []).append(str(message))

    def extend(self, field_identifier: FieldIdentifier, messages) -> None:
        for message in messages:
            self.add(field_identifier, message)

    def clear(self, field_identifier: FieldIdentifier | None = None) -> None:
        if field_identifier is None:
            self._messages.clear()
        else:
            self._messages.pop(field_identifier, None)

    def __getitem__(self, field_identifier: FieldIdentifier) -> list[str]:
        return list(self._messages.get(field_identifier, ()))

    def fields(self) -> list[FieldIdentifier]:
        return list(self._messages)

    def all_messages(self) -> list[str]:
        return [message for messages in self._messages.values() for message in messages]
