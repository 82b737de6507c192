from __future__ import annotations

import json
from datetime import date, timedelta

import pytest

from stellaria.apod.params import ApodParams, ApodParamsBuilder, build_apod_query
from stellaria.core.errors import ApodParamsError, StellariaValidationError

TODAY = date(2026, 10, 17)


def test_builder_default_is_today_without_thumbs():
    params = ApodParams.builder().build(today=TODAY)

    assert params.date == TODAY
    assert params.count is None
    assert params.start_date is None
    assert params.end_date is None
    assert params.thumbs is False


def test_builder_default_reads_clock_at_build_time(monkeypatch):
    builder = ApodParamsBuilder()
    monkeypatch.setattr("stellaria.apod.params._utc_today", lambda: date(2030, 1, 2))

    assert builder.build().date == date(2030, 1, 2)


def test_single_date_upper_bound_is_read_at_build_time(monkeypatch):
    day = date(2030, 1, 1)
    monkeypatch.setattr("stellaria.apod.params._utc_today", lambda: date(2029, 12, 31))
    early = ApodParams.builder().date(day)
    late = ApodParams.builder().date(day)

    with pytest.raises(ApodParamsError, match="and Dec 31, 2029"):
        early.build()

    monkeypatch.setattr("stellaria.apod.params._utc_today", lambda: date(2030, 1, 1))
    assert late.build().date == day


def test_builder_with_single_date():
    day = date(2024, 12, 12)
    params = ApodParams.builder().date(day).build(today=TODAY)

    assert params.date == day
    assert params.start_date is None
    assert params.end_date is None


def test_builder_with_count():
    params = ApodParams.builder().count(5).build(today=TODAY)

    assert params.count == 5
    assert params.date is None


def test_builder_with_date_range():
    start = date(2024, 1, 1)
    end = date(2024, 1, 31)
    params = ApodParams.builder().date_range(start, end).build(today=TODAY)

    assert params.start_date == start
    assert params.end_date == end
    assert params.date is None
    assert params.count is None


def test_builder_with_thumbs_keeps_selection_mode():
    params = ApodParams.builder().count(3).thumbs(True).build(today=TODAY)

    assert params.thumbs is True
    assert params.count == 3


@pytest.mark.parametrize(
    ("configure", "expected"),
    [
        (lambda b: b.date(date(2024, 6, 1)).count(5), {"count": 5}),
        (lambda b: b.count(5).date(date(2024, 6, 1)), {"date": date(2024, 6, 1)}),
        (
            lambda b: b.date(date(2024, 6, 1)).date_range(date(2024, 1, 1), date(2024, 1, 2)),
            {"start_date": date(2024, 1, 1), "end_date": date(2024, 1, 2)},
        ),
        (lambda b: b.date_range(date(2024, 1, 1), date(2024, 1, 2)).count(0), {"count": 0}),
    ],
    ids=["date-then-count", "count-then-date", "date-then-range", "range-then-count"],
)
def test_last_selection_mode_wins(configure, expected):
    params = configure(ApodParams.builder()).build(today=TODAY)

    fields = {"date": None, "start_date": None, "end_date": None, "count": None}
    fields.update(expected)
    for name, value in fields.items():
        assert getattr(params, name) == value


@pytest.mark.parametrize(
    "day",
    [date(1995, 6, 15), TODAY + timedelta(days=1), date(2099, 12, 31)],
    ids=["before-first-apod", "tomorrow", "far-future"],
)
def test_single_date_out_of_bounds_fails(day):
    with pytest.raises(ApodParamsError, match="Date must be between") as excinfo:
        ApodParams.builder().date(day).build(today=TODAY)

    assert excinfo.value.reason == ApodParamsError.DATE_OUT_OF_RANGE
    assert str(excinfo.value) == "Date must be between Jun 16, 1995 and Oct 17, 2026."


@pytest.mark.parametrize("day", [date(1995, 6, 16), TODAY], ids=["first-apod", "today"])
def test_single_date_bounds_are_inclusive(day):
    assert ApodParams.builder().date(day).build(today=TODAY).date == day


def test_single_date_upper_bound_uses_current_date():
    tomorrow = date.today() + timedelta(days=2)
    with pytest.raises(StellariaValidationError):
        ApodParams.builder().date(tomorrow).build()


def test_date_range_reversed_fails():
    with pytest.raises(ApodParamsError, match="Start date cannot be greater than end date") as excinfo:
        ApodParams.builder().date_range(date(2024, 12, 31), date(2024, 1, 1)).build(today=TODAY)

    assert excinfo.value.reason == ApodParamsError.DATE_RANGE_REVERSED


def test_date_range_same_date_succeeds():
    day = date(2024, 6, 15)
    params = ApodParams.builder().date_range(day, day).build(today=TODAY)

    assert params.start_date == day
    assert params.end_date == day


@pytest.mark.parametrize("count", [-1, 256])
def test_count_outside_byte_range_is_rejected(count):
    with pytest.raises(ValueError):
        ApodParams.builder().count(count)


@pytest.mark.parametrize("count", [True, 1.5, "3"])
def test_count_requires_int(count):
    with pytest.raises(TypeError):
        ApodParams.builder().count(count)


def test_builder_rejects_datetime_for_date():
    from datetime import datetime

    with pytest.raises(TypeError):
        ApodParams.builder().date(datetime(2024, 1, 1))


def test_builder_cannot_be_built_twice():
    builder = ApodParams.builder().count(1)
    builder.build(today=TODAY)
    with pytest.raises(RuntimeError):
        builder.build(today=TODAY)


def test_builder_is_consumed_even_when_validation_fails():
    builder = ApodParams.builder().date(date(1990, 1, 1))
    with pytest.raises(ApodParamsError):
        builder.build(today=TODAY)
    with pytest.raises(RuntimeError):
        builder.build(today=TODAY)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"date": date(2024, 1, 1), "count": 2},
        {"start_date": date(2024, 1, 1)},
        {"date": date(2024, 1, 1), "start_date": date(2024, 1, 1), "end_date": date(2024, 1, 2)},
    ],
)
def test_params_reject_more_than_one_selection_mode(kwargs):
    with pytest.raises(ValueError):
        ApodParams(**kwargs)


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"start_date": date(2024, 12, 31), "end_date": date(2024, 1, 1)}, "start_date must not be after end_date"),
        ({"date": date(1995, 6, 15)}, "date must not be before 1995-06-16"),
    ],
    ids=["reversed-range", "before-first-apod"],
)
def test_params_reject_out_of_order_or_pre_apod_dates(kwargs, message):
    with pytest.raises(ValueError, match=message):
        ApodParams(**kwargs)


def test_from_dict_rejects_reversed_range():
    with pytest.raises(ValueError, match="start_date must not be after end_date"):
        ApodParams.from_dict({"start_date": "2024-12-31", "end_date": "2024-01-01"})


def test_params_accept_same_day_range_and_first_apod_date():
    day = date(2024, 6, 15)
    assert ApodParams(start_date=day, end_date=day).start_date == day
    assert ApodParams(date=date(1995, 6, 16)).date == date(1995, 6, 16)


def test_to_dict_renders_date_as_string():
    params = ApodParams.builder().date(date(2024, 12, 12)).build(today=TODAY)
    assert params.to_dict() == {"date": "2024-12-12", "thumbs": False}


def test_to_dict_date_range_and_count():
    ranged = ApodParams.builder().date_range(date(2024, 1, 1), date(2024, 1, 31)).build(today=TODAY)
    counted = ApodParams.builder().count(10).thumbs(True).build(today=TODAY)

    assert ranged.to_dict() == {"start_date": "2024-01-01", "end_date": "2024-01-31", "thumbs": False}
    assert counted.to_dict() == {"count": 10, "thumbs": True}


def test_from_dict_parses_date_string_and_defaults_thumbs():
    params = ApodParams.from_dict({"date": "2024-12-12"})

    assert params.date == date(2024, 12, 12)
    assert params.thumbs is False


def test_json_round_trip_preserves_every_field():
    original = ApodParams.builder().date(date(2024, 6, 15)).thumbs(True).build(today=TODAY)

    restored = ApodParams.from_dict(json.loads(json.dumps(original.to_dict())))

    assert restored == original


def test_build_apod_query_omits_absent_fields_and_always_sends_thumbs():
    params = ApodParams.builder().date_range(date(2024, 1, 1), date(2024, 1, 31)).build(today=TODAY)

    assert build_apod_query(params) == {
        "start_date": "2024-01-01",
        "end_date": "2024-01-31",
        "thumbs": "false",
    }


def test_build_apod_query_count_and_thumbs():
    params = ApodParams.builder().count(7).thumbs(True).build(today=TODAY)
    assert build_apod_query(params) == {"count": "7", "thumbs": "true"}


def test_build_apod_query_for_bare_params_only_sends_thumbs():
    assert build_apod_query(ApodParams()) == {"thumbs": "false"}
