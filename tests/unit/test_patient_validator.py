"""Unit tests for the domain-level Patient business rules."""
from dataclasses import replace
from datetime import date, timedelta

import pytest

from patient_lookup.domain.model import Patient
from patient_lookup.domain.validators import PatientValidator


def fields_of(violations):
    return [v.field for v in violations]


def test_valid_patient_passes(john_smith):
    assert PatientValidator().validate(john_smith) == []


@pytest.mark.parametrize("nhs_number", ["", "123", "12345", "123456789", "12345678901"])
def test_nhs_number_with_wrong_length_fails(john_smith, nhs_number):
    patient = replace(john_smith, nhs_number=nhs_number)

    violations = PatientValidator().validate(patient)

    assert "nhs_number" in fields_of(violations)


def test_empty_nhs_number_reports_every_broken_rule():
    patient = Patient(1, "", "John Smith", date(1980, 5, 15), "Central Medical Practice")

    violations = PatientValidator().validate(patient)

    assert [v.message for v in violations] == [
        "NHS Number is required",
        "NHS Number must be exactly 10 digits long",
        "NHS Number must contain only digits",
    ]


@pytest.mark.parametrize(
    "nhs_number",
    ["123456789\n", "\n123456789", "12345 6789", "\u0661\u0662\u0663\u0664\u0665\u0666\u0667\u0668\u0669\u0660"],
)
def test_ten_characters_that_are_not_all_ascii_digits_fail(john_smith, nhs_number):
    violations = PatientValidator().validate(replace(john_smith, nhs_number=nhs_number))

    assert [v.message for v in violations] == ["NHS Number must contain only digits"]


def test_nhs_number_containing_letters_fails(john_smith):
    patient = replace(john_smith, nhs_number="123456789A")

    violations = PatientValidator().validate(patient)

    assert [v.message for v in violations] == ["NHS Number must contain only digits"]


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_fails(john_smith, name):
    violations = PatientValidator().validate(replace(john_smith, name=name))

    assert fields_of(violations) == ["name"]


def test_name_longer_than_200_characters_fails(john_smith):
    assert PatientValidator().validate(replace(john_smith, name="x" * 200)) == []

    violations = PatientValidator().validate(replace(john_smith, name="x" * 201))

    assert fields_of(violations) == ["name"]


def test_future_date_of_birth_fails(john_smith):
    today = date(2024, 1, 15)
    patient = replace(john_smith, date_of_birth=today + timedelta(days=1))

    violations = PatientValidator().validate(patient, today=today)

    assert fields_of(violations) == ["date_of_birth"]


def test_date_of_birth_defaults_to_current_date(john_smith):
    patient = replace(john_smith, date_of_birth=date.today() + timedelta(days=2))

    assert fields_of(PatientValidator().validate(patient)) == ["date_of_birth"]


def test_blank_or_too_long_gp_practice_fails(john_smith):
    validator = PatientValidator()

    assert fields_of(validator.validate(replace(john_smith, gp_practice=""))) == ["gp_practice"]
    assert fields_of(validator.validate(replace(john_smith, gp_practice="p" * 201))) == ["gp_practice"]


@pytest.mark.parametrize("patient_id", [0, -1])
def test_non_positive_id_fails(john_smith, patient_id):
    violations = PatientValidator().validate(replace(john_smith, id=patient_id))

    assert fields_of(violations) == ["id"]
    assert violations[0].message == "Patient ID must be greater than 0"


def test_multiple_valid_patients_all_pass():
    validator = PatientValidator()
    patients = [
        Patient(1, "1111111111", "Patient One", date(1980, 1, 1), "Practice A"),
        Patient(2, "2222222222", "Patient Two", date(1990, 1, 1), "Practice B"),
        Patient(3, "3333333333", "Patient Three", date(2000, 1, 1), "Practice C"),
    ]

    for patient in patients:
        assert validator.validate(patient) == []
