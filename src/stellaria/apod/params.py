"""APOD request parameters, fluent builder, and query serialization."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timezone

from ..core.errors import ApodParamsError
from .dates import decode_date, encode_date, ensure_calendar_date

APOD_FIRST_DATE = date(1995, 6, 16)
MAX_COUNT = 255
_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _format_bound(value: date) -> str:
    return f"{_MONTH_ABBR[value.month - 1]} {value.day}, {value.year}"


def _validate_count(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("count must be int")
    if not 0 <= value <= MAX_COUNT:
        raise ValueError(f"count must be between 0 and {MAX_COUNT}")
    return value


@dataclass(slots=True, frozen=True)
class ApodParams:
    """Finalized APOD query parameters.

    At most one selection mode is set: ``date``, the ``start_date``/``end_date``
    pair, or ``count``. When none is set the service answers for today.
    Range order and the first APOD date are checked here; the upper bound
    depends on the clock and is checked by :class:`ApodParamsBuilder`.
    """

    date: date | None = None
    start_date: date | None = None
    end_date: date | None = None
    count: int | None = None
    thumbs: bool = False

    def __post_init__(self) -> None:
        for name in ("date", "start_date", "end_date"):
            value = getattr(self, name)
            if value is not None:
                ensure_calendar_date(value, name=name)
        if self.count is not None:
            _validate_count(self.count)
        if not isinstance(self.thumbs, bool):
            raise TypeError("thumbs must be bool")
        if (self.start_date is None) != (self.end_date is None):
            raise ValueError("start_date and end_date must be set together")
        modes = sum(
            (
                self.date is not None,
                self.start_date is not None,
                self.count is not None,
            )
        )
        if modes > 1:
            raise ValueError("only one of date, start_date/end_date, count may be set")
        if self.start_date is not None and self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        if self.date is not None and self.date < APOD_FIRST_DATE:
            raise ValueError(f"date must not be before {APOD_FIRST_DATE.isoformat()}")

    @staticmethod
    def builder() -> "ApodParamsBuilder":
        return ApodParamsBuilder()

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {}
        if self.date is not None:
            data["date"] = encode_date(self.date)
        if self.start_date is not None:
            data["start_date"] = encode_date(self.start_date)
        if self.end_date is not None:
            data["end_date"] = encode_date(self.end_date)
        if self.count is not None:
            data["count"] = self.count
        data["thumbs"] = self.thumbs
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "ApodParams":
        def _optional_date(key: str) -> date | None:
            value = data.get(key)
            return decode_date(value) if value is not None else None  # type: ignore[arg-type]

        count = data.get("count")
        return cls(
            date=_optional_date("date"),
            start_date=_optional_date("start_date"),
            end_date=_optional_date("end_date"),
            count=_validate_count(count) if count is not None else None,
            thumbs=data.get("thumbs", False),  # type: ignore[arg-type]
        )


@dataclass(slots=True, frozen=True)
class _CountMode:
    count: int


@dataclass(slots=True, frozen=True)
class _SingleDateMode:
    date: date


@dataclass(slots=True, frozen=True)
class _DateRangeMode:
    start_date: date
    end_date: date


_SelectionMode = _CountMode | _SingleDateMode | _DateRangeMode


class ApodParamsBuilder:
    """Fluent builder for :class:`ApodParams`.

    ``count``, ``date`` and ``date_range`` each replace the previously chosen
    selection mode. ``build`` consumes the builder.
    """

    def __init__(self) -> None:
        self._thumbs = False
        self._mode: _SelectionMode | None = None
        self._built = False

    def thumbs(self, thumbs: bool) -> "ApodParamsBuilder":
        if not isinstance(thumbs, bool):
            raise TypeError("thumbs must be bool")
        self._thumbs = thumbs
        return self

    def count(self, count: int) -> "ApodParamsBuilder":
        self._mode = _CountMode(_validate_count(count))
        return self

    def date(self, value: date) -> "ApodParamsBuilder":
        self._mode = _SingleDateMode(ensure_calendar_date(value))
        return self

    def date_range(self, start_date: date, end_date: date) -> "ApodParamsBuilder":
        self._mode = _DateRangeMode(
            ensure_calendar_date(start_date, name="start_date"),
            ensure_calendar_date(end_date, name="end_date"),
        )
        return self

    def build(self, *, today: date | None = None) -> ApodParams:
        """Validate the selection and return finalized params.

        ``today`` defaults to the current UTC date, read at call time.
        """

        if self._built:
            raise RuntimeError("ApodParamsBuilder has already been built")
        self._built = True

        mode = self._mode
        if isinstance(mode, _CountMode):
            return ApodParams(count=mode.count, thumbs=self._thumbs)

        current = ensure_calendar_date(today, name="today") if today is not None else _utc_today()
        if mode is None:
            return ApodParams(date=current, thumbs=self._thumbs)

        if isinstance(mode, _SingleDateMode):
            if not APOD_FIRST_DATE <= mode.date <= current:
                raise ApodParamsError(
                    f"Date must be between {_format_bound(APOD_FIRST_DATE)} "
                    f"and {_format_bound(current)}.",
                    reason=ApodParamsError.DATE_OUT_OF_RANGE,
                )
            return ApodParams(date=mode.date, thumbs=self._thumbs)

        if mode.start_date > mode.end_date:
            raise ApodParamsError(
                "Start date cannot be greater than end date",
                reason=ApodParamsError.DATE_RANGE_REVERSED,
            )
        return ApodParams(
            start_date=mode.start_date,
            end_date=mode.end_date,
            thumbs=self._thumbs,
        )


def build_apod_query(params: ApodParams) -> dict[str, str]:
    query: dict[str, str] = {}
    if params.date is not None:
        query["date"] = encode_date(params.date)
    if params.start_date is not None:
        query["start_date"] = encode_date(params.start_date)
    if params.end_date is not None:
        query["end_date"] = encode_date(params.end_date)
    if params.count is not None:
        query["count"] = str(params.count)
    query["thumbs"] = "true" if params.thumbs else "false"
    return query


__all__ = [
    "APOD_FIRST_DATE",
    "MAX_COUNT",
    "ApodParams",
    "ApodParamsBuilder",
    "build_apod_query",
]
