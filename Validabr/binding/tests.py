from django.test import SimpleTestCase
from rest_framework import serializers

from binding.context import EditContext, FieldIdentifier, ValidationMessageStore
from binding.serializers import (
    PropertyValidatorMixin,
    SerializerValidation,
    as_data,
    flatten_errors,
    to_field_identifier,
)
from brazil.serializers import CPFField


class Address:
    def __init__(self, city=""):
        self.city = city


class Person:
    def __init__(self, name="", cpf="", city=""):
        self.name = name
        self.cpf = cpf
        self.address = Address(city)


class AddressSerializer(serializers.Serializer):
    city = serializers.CharField(error_messages={"blank": "Cidade é obrigatória."})


class PersonSerializer(PropertyValidatorMixin, serializers.Serializer):
    name = serializers.CharField(error_messages={"blank": "Nome é obrigatório."})
    cpf = CPFField(allow_blank=True)
    address = AddressSerializer()


class EditContextTest(SimpleTestCase):
    def test_field_identifier_equality(self):
        person = Person()
        self.assertEqual(FieldIdentifier(person, "name"), FieldIdentifier(person, "name"))
        self.assertNotEqual(FieldIdentifier(person, "name"), FieldIdentifier(Person(), "name"))
        self.assertEqual(len({FieldIdentifier(person, "name"), FieldIdentifier(person, "name")}), 1)

    def test_requires_model(self):
        with self.assertRaises(ValueError):
            EditContext(None)

    def test_field_changed_marks_modified(self):
        context = EditContext(Person())
        changed = []
        context.on_field_changed.append(lambda ctx, field: changed.append(field.field_name))
        context.notify_field_changed(context.field("name"))
        self.assertEqual(changed, ["name"])
        self.assertTrue(context.is_modified(context.field("name")))
        self.assertFalse(context.is_modified(context.field("cpf")))
        context.mark_as_unmodified()
        self.assertFalse(context.is_modified())

    def test_message_store(self):
        context = EditContext(Person())
        store = ValidationMessageStore(context)
        store.add(context.field("name"), "erro 1")
        store.extend(context.field("cpf"), ["erro 2", "erro 3"])
        self.assertEqual(context.get_validation_messages(context.field("cpf")), ["erro 2", "erro 3"])
        self.assertEqual(len(context.get_validation_messages()), 3)
        self.assertFalse(context.validate())
        store.clear(context.field("cpf"))
        self.assertEqual(context.get_validation_messages(), ["erro 1"])
        store.clear()
        self.assertTrue(context.validate())


class ErrorPathTest(SimpleTestCase):
    def test_flatten_nested_errors(self):
        failures = flatten_errors({
            "name": ["Nome é obrigatório."],
            "address": {"city": ["Cidade é obrigatória."]},
            "items": [{}, {"sku": ["Inválido."]}],
        })
        self.assertEqual(
            [(f.property_name, f.error_message) for f in failures],
            [
                ("name", "Nome é obrigatório."),
                ("address.city", "Cidade é obrigatória."),
                ("items.1.sku", "Inválido."),
            ],
        )

    def test_to_field_identifier(self):
        person = Person()
        person.items = [Address(), Address()]
        context = EditContext(person)
        self.assertEqual(to_field_identifier(context, "name"), FieldIdentifier(person, "name"))
        self.assertEqual(to_field_identifier(context, "address.city"), FieldIdentifier(person.address, "city"))
        self.assertEqual(to_field_identifier(context, "items.1.city"), FieldIdentifier(person.items[1], "city"))
        self.assertEqual(to_field_identifier(context, "non_field_errors"), FieldIdentifier(person, ""))
        self.assertEqual(to_field_identifier(context, "missing.city"), FieldIdentifier(person, "missing.city"))

    def test_as_data(self):
        self.assertEqual(
            as_data(Person("Ana", "58300893008", "Recife")),
            {"name": "Ana", "cpf": "58300893008", "address": {"city": "Recife"}},
        )


class SerializerValidationTest(SimpleTestCase):
    def test_validate_model_with_errors(self):
        person = Person()
        context = EditContext(person)
        validation = SerializerValidation(person, PersonSerializer, context)

        result = validation.validate()

        self.assertFalse(result.is_valid)
        self.assertEqual(len(result.errors), 2)
        self.assertEqual({e.property_name for e in result.errors}, {"name", "address.city"})

    def test_validate_nested_property_binds_to_owner(self):
        person = Person()
        context = EditContext(person)
        validation = SerializerValidation(person, PersonSerializer, context)

        validation.validate()

        messages = context.get_validation_messages(FieldIdentifier(person.address, "city"))
        self.assertEqual(messages, ["Cidade é obrigatória."])
        self.assertEqual(context.get_validation_messages(context.field("city")), [])

    def test_validate_field_only_shows_that_field(self):
        person = Person(cpf="111.111.111-11")
        context = EditContext(person)
        validation = SerializerValidation(person, PersonSerializer, context)

        validation.validate_field(context.field("name"))

        self.assertEqual(context.get_validation_messages(context.field("name")), ["Nome é obrigatório."])
        self.assertEqual(context.get_validation_messages(context.field("cpf")), [])
        self.assertEqual(len(context.get_validation_messages()), 1)

    def test_field_changed_revalidates_field(self):
        person = Person(name="Ana", city="Recife", cpf="111.111.111-11")
        context = EditContext(person)
        SerializerValidation(person, PersonSerializer, context)
        cpf = context.field("cpf")

        context.notify_field_changed(cpf)
        self.assertEqual(context.get_validation_messages(cpf), ["CPF inválido."])

        person.cpf = "583.008.930-08"
        context.notify_field_changed(cpf)
        self.assertEqual(context.get_validation_messages(cpf), [])

    def test_edit_context_validate_triggers_state_changed(self):
        person = Person()
        context = EditContext(person)
        SerializerValidation(person, PersonSerializer, context)
        triggered = []
        context.on_validation_state_changed.append(lambda ctx: triggered.append(True))

        self.assertFalse(context.validate())
        self.assertTrue(triggered)

        person.name = "Ana"
        person.address.city = "Recife"
        self.assertTrue(context.validate())

    def test_auto_validation_can_be_disabled(self):
        person = Person()
        context = EditContext(person)
        SerializerValidation(
            person,
            PersonSerializer,
            context,
            auto_validation_on_requested=False,
            auto_validation_on_field_changed=False,
        )
        self.assertTrue(context.validate())
        context.notify_field_changed(context.field("name"))
        self.assertEqual(context.get_validation_messages(), [])

    def test_mapping_model(self):
        data = {"name": "Ana", "cpf": "", "address": {"city": ""}}
        context = EditContext(data)
        SerializerValidation(data, PersonSerializer, context)
        self.assertFalse(context.validate())
        self.assertEqual(
            context.get_validation_messages(FieldIdentifier(data["address"], "city")),
            ["Cidade é obrigatória."],
        )


class PropertyValidatorTest(SimpleTestCase):
    def test_validate_property(self):
        person = Person(cpf="583.008.930-00")
        self.assertEqual(PersonSerializer.validate_property(person, "name"), ["Nome é obrigatório."])
        self.assertEqual(PersonSerializer.validate_property(person, "cpf"), ["CPF inválido."])
        self.assertEqual(PersonSerializer.validate_property(person, "address.city"), ["Cidade é obrigatória."])

    def test_valid_property_returns_empty(self):
        person = Person(name="Ana", cpf="583.008.930-08", city="Recife")
        self.assertEqual(PersonSerializer.validate_property(person, "cpf"), [])
        self.assertEqual(PersonSerializer.validate_property(person, "name"), [])
