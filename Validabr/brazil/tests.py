from django import forms
from django.core.exceptions import ValidationError
from django.template import Context, Template
from django.test import SimpleTestCase
from rest_framework import serializers

from brazil.fields import CNPJField, CPFField, CPFOrCNPJField
from brazil.formatting import FormatError, format_cnpj, format_cpf
from brazil.serializers import CNPJField as CNPJSerializerField
from brazil.serializers import CPFField as CPFSerializerField
from brazil.validators import (
    CNPJValidator,
    CPFValidator,
    ZipCodeValidator,
    is_cnpj,
    is_cpf,
    is_cpf_or_cnpj,
    is_mobile_number,
    is_zip_code_number,
    normalize,
)


class NormalizeTest(SimpleTestCase):
    def test_keeps_only_digits_in_order(self):
        for value in ["583.008.930-08", "03.785.417/0001-03", "(21) 95555-7777", "a1b2c3", "", "abc"]:
            digits = normalize(value)
            self.assertTrue(all(ch in "0123456789" for ch in digits))
            self.assertLessEqual(len(digits), len(value))
        self.assertEqual(normalize("03.785.417/0001-03"), "03785417000103")
        self.assertEqual(normalize("a1b2c3"), "123")

    def test_empty_and_none(self):
        self.assertEqual(normalize(""), "")
        self.assertEqual(normalize(None), "")


class CPFTest(SimpleTestCase):
    def test_valid(self):
        self.assertTrue(is_cpf("583.008.930-08"))
        self.assertTrue(is_cpf("83289988074"))
        self.assertTrue(is_cpf(" 832 899 880 74 "))

    def test_invalid(self):
        self.assertFalse(is_cpf("erro"))
        self.assertFalse(is_cpf("12345678901"))
        self.assertFalse(is_cpf(""))
        self.assertFalse(is_cpf(None))
        self.assertFalse(is_cpf("583.008.930-00"))
        self.assertFalse(is_cpf("583.008.930-081"))
        self.assertFalse(is_cpf("583.008.930"))

    def test_repdigits_are_rejected(self):
        for digit in "0123456789":
            self.assertFalse(is_cpf(digit * 11))


class CNPJTest(SimpleTestCase):
    def test_valid(self):
        self.assertTrue(is_cnpj("03.785.417/0001-03"))
        self.assertTrue(is_cnpj("54243121000193"))

    def test_invalid(self):
        self.assertFalse(is_cnpj("12345678901234"))
        self.assertFalse(is_cnpj(""))
        self.assertFalse(is_cnpj("03.785.417/0001-00"))
        self.assertFalse(is_cnpj("03.785.417/0001-031"))
        self.assertFalse(is_cnpj("03.785.417/0001"))
        self.assertFalse(is_cnpj("583.008.930-08"))

    def test_repdigits_are_rejected(self):
        for digit in "0123456789":
            self.assertFalse(is_cnpj(digit * 14))


class CPFOrCNPJTest(SimpleTestCase):
    def test_dispatch_by_length(self):
        self.assertTrue(is_cpf_or_cnpj("583.008.930-08"))
        self.assertTrue(is_cpf_or_cnpj("03.785.417/0001-03"))
        for value in ["11111111111", "11111111111111", "583.008.930-00", "54243121000190"]:
            self.assertEqual(is_cpf_or_cnpj(value), is_cpf(value) or is_cnpj(value))
            self.assertFalse(is_cpf_or_cnpj(value))

    def test_other_lengths(self):
        for value in ["erro", "1234567890", "123456789012345", ""]:
            self.assertFalse(is_cpf_or_cnpj(value))


class ContactTest(SimpleTestCase):
    def test_mobile_number(self):
        self.assertTrue(is_mobile_number("61944446666"))
        self.assertTrue(is_mobile_number("21955557777"))
        self.assertTrue(is_mobile_number("(21) 95555-7777"))
        self.assertTrue(is_mobile_number("11999999999"))
        self.assertFalse(is_mobile_number("erro"))
        self.assertFalse(is_mobile_number("994645"))
        self.assertFalse(is_mobile_number("21866664444"))
        self.assertFalse(is_mobile_number(""))
        self.assertFalse(is_mobile_number("1234567890"))
        self.assertFalse(is_mobile_number("999999999999"))
        self.assertFalse(is_mobile_number("1199999999a"))

    def test_zip_code(self):
        self.assertTrue(is_zip_code_number("71065-100"))
        self.assertTrue(is_zip_code_number("88999232"))
        self.assertTrue(is_zip_code_number("12345-678"))
        self.assertFalse(is_zip_code_number("(21) 95555-7777"))
        self.assertFalse(is_zip_code_number("95.555-777"))
        self.assertFalse(is_zip_code_number("error"))
        self.assertFalse(is_zip_code_number(""))
        self.assertFalse(is_zip_code_number("1234567"))
        self.assertFalse(is_zip_code_number("123456789"))
        self.assertFalse(is_zip_code_number("12345-6789"))
        self.assertFalse(is_zip_code_number(None))


class FormatTest(SimpleTestCase):
    def test_format_cpf(self):
        self.assertEqual(format_cpf("58300893008"), "583.008.930-08")
        self.assertEqual(format_cpf("83289988074"), "832.899.880-74")
        self.assertEqual(format_cpf("00000000000"), "000.000.000-00")
        self.assertEqual(format_cpf("1"), "000.000.000-01")

    def test_format_cnpj(self):
        self.assertEqual(format_cnpj("3785417000133"), "03.785.417/0001-33")
        self.assertEqual(format_cnpj("54243121000193"), "54.243.121/0001-93")
        self.assertEqual(format_cnpj("00000000000000"), "00.000.000/0000-00")

    def test_round_trip(self):
        for digits in ["58300893008", "83289988074"]:
            self.assertEqual(normalize(format_cpf(digits)), digits)
        for digits in ["03785417000103", "54243121000193"]:
            self.assertEqual(normalize(format_cnpj(digits)), digits)

    def test_format_errors(self):
        for func in (format_cpf, format_cnpj):
            with self.assertRaises(FormatError):
                func("")
            with self.assertRaises(FormatError):
                func("abc")
            with self.assertRaises(FormatError):
                func("583.008.930-08")
            with self.assertRaises(OverflowError):
                func("999999999999999999999")

    def test_uint64_boundary(self):
        self.assertEqual(format_cpf(str(2**64 - 1)), "184467440737.095.516-15")
        for func in (format_cpf, format_cnpj):
            with self.assertRaises(OverflowError):
                func(str(2**64))

    def test_very_long_input_overflows(self):
        for func in (format_cpf, format_cnpj):
            with self.assertRaises(OverflowError):
                func("9" * 5000)
        self.assertEqual(format_cpf("0" * 5000 + "58300893008"), "583.008.930-08")

    def test_non_string_input(self):
        for func in (format_cpf, format_cnpj):
            for value in (58300893008, None, b"58300893008"):
                with self.assertRaises(FormatError):
                    func(value)

    def test_format_error_is_value_error(self):
        self.assertTrue(issubclass(FormatError, ValueError))


class RuleValidatorTest(SimpleTestCase):
    def test_blank_values_pass(self):
        for value in (None, "", "   "):
            CPFValidator()(value)
            CNPJValidator()(value)

    def test_invalid_value_raises(self):
        with self.assertRaises(ValidationError) as ctx:
            CPFValidator()("111.111.111-11")
        self.assertEqual(ctx.exception.code, "invalid_cpf")
        self.assertEqual(ctx.exception.messages, ["CPF inválido."])

    def test_custom_message(self):
        validator = ZipCodeValidator(message="CEP fora do padrão.", code="cep")
        with self.assertRaises(ValidationError) as ctx:
            validator("12345-6789")
        self.assertEqual(ctx.exception.code, "cep")
        self.assertEqual(ctx.exception.messages, ["CEP fora do padrão."])

    def test_equality(self):
        self.assertEqual(CPFValidator(), CPFValidator())
        self.assertNotEqual(CPFValidator(), CPFValidator(message="outro"))


class ClientForm(forms.Form):
    cpf = CPFField(required=False)
    cnpj = CNPJField(required=False)
    document = CPFOrCNPJField()


class FormFieldTest(SimpleTestCase):
    def test_cleans_to_digits(self):
        form = ClientForm(data={
            "cpf": "583.008.930-08",
            "cnpj": "",
            "document": "03.785.417/0001-03",
        })
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["cpf"], "58300893008")
        self.assertEqual(form.cleaned_data["cnpj"], "")
        self.assertEqual(form.cleaned_data["document"], "03785417000103")

    def test_invalid_values(self):
        form = ClientForm(data={"cpf": "583.008.930-00", "cnpj": "11111111111111", "document": "erro"})
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["cpf"], ["CPF inválido."])
        self.assertEqual(form.errors["cnpj"], ["CNPJ inválido."])
        self.assertEqual(form.errors["document"], ["CPF ou CNPJ inválido."])

    def test_initial_value_is_displayed_formatted(self):
        form = ClientForm(initial={"cpf": "58300893008", "cnpj": "54243121000193"})
        self.assertEqual(form["cpf"].value(), "583.008.930-08")
        self.assertIn('value="583.008.930-08"', str(form["cpf"]))
        self.assertIn('value="54.243.121/0001-93"', str(form["cnpj"]))
        self.assertIn('placeholder="000.000.000-00"', str(form["cpf"]))


class CompanySerializer(serializers.Serializer):
    cpf = CPFSerializerField(required=False)
    cnpj = CNPJSerializerField()


class SerializerFieldTest(SimpleTestCase):
    def test_valid_data(self):
        serializer = CompanySerializer(data={"cpf": "583.008.930-08", "cnpj": "03.785.417/0001-03"})
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data["cpf"], "58300893008")
        self.assertEqual(serializer.validated_data["cnpj"], "03785417000103")

    def test_invalid_data(self):
        serializer = CompanySerializer(data={"cpf": "11111111111", "cnpj": "12345678901234"})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(serializer.errors["cpf"], ["CPF inválido."])
        self.assertEqual(serializer.errors["cnpj"], ["CNPJ inválido."])
        self.assertEqual(serializer.errors["cnpj"][0].code, "invalid")

    def test_representation_is_formatted(self):
        data = CompanySerializer({"cpf": "58300893008", "cnpj": "54243121000193"}).data
        self.assertEqual(data["cpf"], "583.008.930-08")
        self.assertEqual(data["cnpj"], "54.243.121/0001-93")


class TemplateFilterTest(SimpleTestCase):
    def render(self, source, **context):
        return Template("{% load brazil_format %}" + source).render(Context(context))

    def test_filters(self):
        self.assertEqual(self.render("{{ value|cpf }}", value="58300893008"), "583.008.930-08")
        self.assertEqual(self.render("{{ value|cnpj }}", value=54243121000193), "54.243.121/0001-93")

    def test_invalid_value_is_kept(self):
        self.assertEqual(self.render("{{ value|cpf }}", value="abc"), "abc")
        self.assertEqual(self.render("{{ value|cnpj }}", value=""), "")

    def test_none_renders_empty(self):
        self.assertEqual(self.render("{{ value|cpf }}", value=None), "")
        self.assertEqual(self.render("{{ value|cnpj }}", value=None), "")

    def test_very_long_value_is_kept(self):
        huge = "9" * 5000
        self.assertEqual(self.render("{{ value|cpf }}", value=huge), huge)
        self.assertEqual(self.render("{{ value|cnpj }}", value=huge), huge)
