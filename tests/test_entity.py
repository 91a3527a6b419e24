"""
DischargeSummary entity tests.
"""

from dataclasses import replace

import pytest

from dischargeai.domain.entities.discharge_summary import DischargeSummary
from dischargeai.domain.enums.discharge import DischargeCondition, Gender, UnitOfAdmission
from dischargeai.domain.errors import InvalidDischargeDataError


def test_enum_values_are_coerced(draft):
    assert draft.gender is Gender.MALE
    assert draft.unit_of_admission is UnitOfAdmission.PICU
    assert draft.discharge_condition is DischargeCondition.STABLE


@pytest.mark.parametrize("field, value", [
    ("patient_name", ""),
    ("patient_name", "  "),
    ("ip_number", ""),
    ("follow_up_plan", ""),
    ("age", -1),
    ("age", True),
    ("age", 151),
    ("admission_date", "2023-02-30"),
    ("discharge_date", "yesterday"),
    ("admission_date", "2023-W40-1"),
])
def test_invalid_values_raise(draft, field, value):
    with pytest.raises(InvalidDischargeDataError) as exc_info:
        replace(draft, **{field: value})
    assert exc_info.value.field == field


def test_unknown_enum_value_raises(draft):
    with pytest.raises(ValueError):
        replace(draft, gender="Unknown")


def test_discharge_before_admission_is_accepted(draft):
    summary = replace(draft, admission_date="2023-10-05", discharge_date="2023-10-01")
    assert summary.discharge_date == "2023-10-01"


def test_input_data_has_plain_values(draft):
    data = draft.input_data()
    assert data["gender"] == "Male"
    assert data["discharge_condition"] == "Stable"
    assert "id" not in data and "created_at" not in data and "generated_summary" not in data
    assert set(data) == set(DischargeSummary.input_field_names())


def test_age_sex_label(draft):
    assert draft.age_sex == "2y / Male"


def test_condition_labels():
    assert DischargeCondition.LAMA.label == "LAMA (Left Against Medical Advice)"
    assert DischargeCondition.STABLE.label == "Stable"
