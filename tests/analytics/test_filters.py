from __future__ import annotations

from datetime import date

from attendance_tracker.analytics.aggregator import summarize
from attendance_tracker.analytics.filters import (
    FilterSpec,
    apply_filters,
    filter_records,
    paginate,
    recent_first,
)
from attendance_tracker.attendance.model import normalize_record


def _ids(records):
    return [r.record_id for r in records]


def test_search_matches_employee_id(scenario_records):
    assert _ids(filter_records(scenario_records, FilterSpec(search="EMP2"))) == [3]


def test_search_is_case_insensitive_on_name_or_id(scenario_records):
    assert _ids(filter_records(scenario_records, FilterSpec(search="ann"))) == [1, 2]
    assert _ids(filter_records(scenario_records, FilterSpec(search="emp"))) == [1, 2, 3]


def test_status_filter(scenario_records):
    assert _ids(filter_records(scenario_records, FilterSpec(status="Absent"))) == [2]
    assert _ids(filter_records(scenario_records, FilterSpec(status="PRESENT"))) == [1, 3]


def test_all_and_blank_values_are_unconstrained(scenario_records):
    spec = FilterSpec(status="All", department="all", search="  ")
    assert filter_records(scenario_records, spec) == scenario_records


def test_empty_spec_returns_input_unchanged(scenario_records):
    result = filter_records(scenario_records, FilterSpec())
    assert result == scenario_records
    assert FilterSpec().is_empty()


def test_exact_date_and_inclusive_range(scenario_records):
    assert _ids(filter_records(scenario_records, FilterSpec(work_date=date(2024, 1, 1)))) == [1, 3]
    assert _ids(filter_records(scenario_records, FilterSpec(start_date=date(2024, 1, 2)))) == [2]
    assert _ids(filter_records(scenario_records, FilterSpec(end_date=date(2024, 1, 1)))) == [1, 3]
    spec = FilterSpec(start_date=date(2024, 1, 1), end_date=date(2024, 1, 2))
    assert _ids(filter_records(scenario_records, spec)) == [1, 2, 3]


def test_criteria_combine_with_and(scenario_records):
    spec = FilterSpec(search="EMP1", status="present")
    assert _ids(filter_records(scenario_records, spec)) == [1]


def test_department_filter_uses_inferred_department():
    records = [
        normalize_record({"id": 1, "employeeName": "Kim", "employeeID": "EMP004", "status": "Present", "date": "2024-01-01"}),
        normalize_record({"id": 2, "employeeName": "Lou", "employeeID": "Z1", "status": "Present", "date": "2024-01-01"}),
    ]
    assert _ids(filter_records(records, FilterSpec(department="marketing"))) == [1]
    assert _ids(filter_records(records, FilterSpec(department="General"))) == [2]


def test_filtering_is_idempotent(scenario_records):
    spec = FilterSpec(search="emp", status="Present", start_date=date(2024, 1, 1))
    once = filter_records(scenario_records, spec)
    assert filter_records(once, spec) == once


def test_from_mapping_treats_invalid_values_as_no_constraint(scenario_records):
    spec = FilterSpec.from_mapping({"date": "not-a-date", "startDate": "2024-13-40", "limit": "abc", "status": "All"})

    assert spec == FilterSpec()
    assert filter_records(scenario_records, spec) == scenario_records


def test_from_mapping_parses_camel_case_and_timestamps():
    spec = FilterSpec.from_mapping(
        {"startDate": "2024-01-01", "endDate": "2024-01-31T00:00:00.000Z", "limit": "25", "department": "IT"}
    )
    assert spec.start_date == date(2024, 1, 1)
    assert spec.end_date == date(2024, 1, 31)
    assert spec.limit == 25
    assert spec.department == "IT"


def test_limit_caps_rows_but_not_stats(scenario_records):
    result = apply_filters(scenario_records, FilterSpec(limit=1))

    assert _ids(result.visible) == [1]
    assert result.total_matches == 3
    assert summarize(result.matched).total == 3
    assert summarize(result.visible).total == 1


def test_paginate_ignores_non_positive_limit(scenario_records):
    assert paginate(scenario_records, 0) == scenario_records
    assert paginate(scenario_records, None) == scenario_records


def test_recent_first_breaks_ties_by_input_order():
    records = [
        normalize_record({"id": "a", "date": "2024-01-01"}),
        normalize_record({"id": "b"}),
        normalize_record({"id": "c", "date": "2024-01-05"}),
        normalize_record({"id": "d", "date": "2024-01-01"}),
    ]
    assert _ids(recent_first(records)) == ["c", "a", "d", "b"]
    assert _ids(recent_first(records, 2)) == ["c", "a"]


def test_filter_spec_accepts_raw_date_strings(scenario_records):
    assert _ids(filter_records(scenario_records, FilterSpec(work_date="2024-01-01"))) == [1, 3]
    assert FilterSpec(start_date="2024-01-02").start_date == date(2024, 1, 2)


def test_unparsable_date_on_filter_spec_means_no_constraint(scenario_records):
    spec = FilterSpec(start_date="garbage", end_date="13/45/2024")

    assert spec.start_date is None
    assert _ids(filter_records(scenario_records, spec)) == [1, 2, 3]
