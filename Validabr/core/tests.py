from django.contrib.auth.password_validation import get_password_validators, validate_password
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.test import SimpleTestCase
from django.utils import translation

from brazil.validators import CPFValidator, MobileNumberValidator
from core.password import CapitalLettersValidator, DigitsValidator, LowerCaseLettersValidator
from core.rules import EmailAddressValidator, validate_object
from core.validators import (
    has_numbers_only,
    is_base64,
    is_decimal_number,
    is_email,
    is_int_number,
    is_long_number,
    parse_data_uri,
)


class NumberPredicatesTest(SimpleTestCase):
    def test_has_numbers_only(self):
        self.assertTrue(has_numbers_only("1234567891012345678910123456789101234567891012345678910"))
        self.assertTrue(has_numbers_only("12345678910"))
        self.assertFalse(has_numbers_only("03.785.417"))
        self.assertFalse(has_numbers_only("-54243121000193"))
        self.assertFalse(has_numbers_only(""))
        self.assertFalse(has_numbers_only(None))

    def test_is_int_number(self):
        self.assertTrue(is_int_number("111111111"))
        self.assertFalse(is_int_number("11111111111"))
        self.assertTrue(is_int_number("-111111111"))
        self.assertFalse(is_int_number("-111111111", positive_only=True))
        self.assertTrue(is_int_number("0", positive_only=True))
        self.assertTrue(is_int_number(" 42 "))
        self.assertFalse(is_int_number("555.666.777-00"))
        self.assertFalse(is_int_number("erro"))

    def test_very_long_numbers_are_rejected(self):
        huge = "9" * 5000
        self.assertFalse(is_int_number(huge))
        self.assertFalse(is_long_number(huge))
        self.assertFalse(is_long_number("-" + huge))
        self.assertTrue(is_int_number("0" * 5000 + "42"))
        self.assertTrue(is_long_number("-" + "0" * 5000 + "42"))

    def test_is_long_number(self):
        self.assertTrue(is_long_number("11111111111"))
        self.assertTrue(is_long_number("-11111111111"))
        self.assertFalse(is_long_number("-11111111111", positive_only=True))
        self.assertFalse(is_long_number("9223372036854775808"))
        self.assertTrue(is_long_number("9223372036854775807"))
        self.assertFalse(is_long_number("erro"))
        self.assertFalse(is_long_number("555.666.777-00"))

    def test_is_decimal_number(self):
        with translation.override("pt-br"):
            self.assertTrue(is_decimal_number("583,08"))
        with translation.override("en"):
            self.assertTrue(is_decimal_number("583.08"))
        self.assertTrue(is_decimal_number("11111111111"))
        self.assertTrue(is_decimal_number("-11111111111"))
        self.assertFalse(is_decimal_number("-11111111111", positive_only=True))
        self.assertTrue(is_decimal_number("83289988074"))
        self.assertFalse(is_decimal_number("erro"))
        self.assertFalse(is_decimal_number("NaN"))
        self.assertFalse(is_decimal_number(""))


class TextPredicatesTest(SimpleTestCase):
    def test_is_email(self):
        self.assertTrue(is_email("fulano@exemplo.com.br"))
        self.assertTrue(is_email("Fulano.Silva@Exemplo.com"))
        self.assertTrue(is_email("admin@[192.168.0.1]"))
        self.assertFalse(is_email("fulano@"))
        self.assertFalse(is_email("fulano.exemplo.com"))
        self.assertFalse(is_email("fulano@exemplo.com\n"))
        self.assertFalse(is_email(None))

    def test_is_base64(self):
        self.assertTrue(is_base64("aGVsbG8="))
        self.assertTrue(is_base64("aGVsbG8gd29ybGQh"))
        self.assertFalse(is_base64("aGVsbG8"))
        self.assertFalse(is_base64("não é base64"))
        self.assertFalse(is_base64(""))

    def test_parse_data_uri(self):
        parsed = parse_data_uri("data:image/png;base64,iVBORw0KGgo=")
        self.assertEqual(
            parsed,
            {"type": "image/png", "extension": "png", "base": "base64", "content": "iVBORw0KGgo="},
        )
        self.assertIsNone(parse_data_uri("iVBORw0KGgo="))
        self.assertIsNone(parse_data_uri("data:image/png;base64,???"))


class PasswordComplexityTest(SimpleTestCase):
    def test_capital_letters(self):
        validator = CapitalLettersValidator(min_occurrences=2)
        validator.validate("SenhaForte")
        with self.assertRaises(ValidationError) as ctx:
            validator.validate("Senhafraca")
        self.assertEqual(ctx.exception.code, "password_too_few_capital_letters")
        self.assertIn("2 letras maiúsculas", ctx.exception.messages[0])

    def test_lower_case_letters(self):
        validator = LowerCaseLettersValidator(min_occurrences=1)
        validator.validate("SENHa")
        with self.assertRaises(ValidationError):
            validator.validate("SENHA123")

    def test_digits(self):
        validator = DigitsValidator(min_occurrences=3)
        validator("abc123")
        with self.assertRaises(ValidationError) as ctx:
            validator("abc12")
        self.assertIn("3 dígitos", ctx.exception.messages[0])

    def test_blank_value_passes(self):
        validator = DigitsValidator(min_occurrences=3)
        validator.validate(None)
        validator.validate("   ")

    def test_disabled_rule(self):
        DigitsValidator(min_occurrences=-1).validate("sem digitos")

    def test_illegal_min_occurrences(self):
        for value in (0, -2):
            with self.assertRaises(ImproperlyConfigured):
                CapitalLettersValidator(min_occurrences=value).validate("Senha")

    def test_help_text(self):
        self.assertEqual(
            DigitsValidator(min_occurrences=1).get_help_text(),
            "A senha deve conter pelo menos 1 dígito.",
        )

    def test_label_in_message(self):
        validator = DigitsValidator(min_occurrences=2, label="A senha do administrador")
        with self.assertRaises(ValidationError) as ctx:
            validator.validate("admin1")
        self.assertEqual(
            ctx.exception.messages[0],
            "A senha do administrador deve conter pelo menos 2 dígitos.",
        )
        self.assertNotEqual(validator, DigitsValidator(min_occurrences=2))

    def test_label_with_validate_object(self):
        rules = {"password": [CapitalLettersValidator(label="A senha de acesso")]}
        self.assertEqual(
            validate_object({"password": "senha"}, rules),
            ["A senha de acesso deve conter pelo menos 1 letra maiúscula."],
        )

    def test_django_password_validation(self):
        validators = get_password_validators([
            {"NAME": "core.password.CapitalLettersValidator", "OPTIONS": {"min_occurrences": 1}},
            {"NAME": "core.password.DigitsValidator", "OPTIONS": {"min_occurrences": 2}},
        ])
        validate_password("Senha12", password_validators=validators)
        with self.assertRaises(ValidationError) as ctx:
            validate_password("senha", password_validators=validators)
        self.assertEqual(len(ctx.exception.messages), 2)


class Person:
    def __init__(self, name, cpf, phone, email):
        self.name = name
        self.cpf = cpf
        self.phone = phone
        self.email = email


class ValidateObjectTest(SimpleTestCase):
    rules = {
        "cpf": [CPFValidator()],
        "phone": [MobileNumberValidator()],
        "email": [EmailAddressValidator()],
    }

    def test_valid_object_returns_none(self):
        person = Person("Maria", "583.008.930-08", "(21) 95555-7777", "maria@exemplo.com")
        self.assertIsNone(validate_object(person, self.rules))

    def test_invalid_fields_collect_messages(self):
        person = Person("Maria", "583.008.930-00", "21866664444", "maria@exemplo.com")
        errors = validate_object(person, self.rules)
        self.assertEqual(errors, ["CPF inválido.", "Número de celular inválido."])

    def test_mapping_and_blank_values(self):
        data = {"cpf": "", "phone": None, "email": "invalido"}
        self.assertEqual(validate_object(data, self.rules), ["Informe um e-mail válido."])

    def test_none_object_is_rejected(self):
        with self.assertRaises(ValueError):
            validate_object(None, self.rules)
