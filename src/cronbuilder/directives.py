"""Field directives for building cron expressions.

A directive describes what one field of the expression should do. Each kind
is its own class, so a directive is always exactly one kind:

    - Every:          every value of the field ("*")
    - Range:          from begin to end ("1-5", week "1/5")
    - Interval:       from start, every step units ("0/15");
                      for week, the start-th occurrence of weekday step ("2#3")
    - Custom:         an explicit list of values ("1,15,30")
    - NoDesignate:    left unspecified ("?", year renders empty)
    - NearestWorkday: workday closest to a day of month ("15W")
    - LastDay:        last day of the month ("L")
    - LastWeekday:    last given weekday of the month ("6L")

Directives are built with the module-level constructors and applied to a
CronExprBuilder, which stamps the field's legal range onto them.

Example:
    from cronbuilder import CronExprBuilder, CronField
    from cronbuilder.directives import interval, nearest_workday

    builder = CronExprBuilder()
    builder.set_condition(
        interval(CronField.MINUTE, 0, 15),
        nearest_workday(15),
    )
    builder.generate()  # "* 0/15 * 15W * ? "
"""

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from cronbuilder import constants
from cronbuilder.fields import CronField, FieldLimit

NO_DESIGNATE_FIELDS = (CronField.DAY, CronField.WEEK, CronField.YEAR)


@dataclass(frozen=True)
class FieldDirective(ABC):
    """Base class for a single field's configured behavior.

    Attributes:
        target: Field the directive applies to
        limit: Legal range of the field, attached when applied to a builder
    """

    target: CronField
    limit: FieldLimit | None = dataclasses.field(default=None, kw_only=True)

    def stamped(self, limit: FieldLimit | None) -> "FieldDirective":
        """Return a copy of this directive carrying the given limit."""
        return dataclasses.replace(self, limit=limit)

    def out_of_range(self) -> bool:
        """Check the directive's values against its stamped limit.

        Returns:
            True if any value falls outside the limit
        """
        return False

    @abstractmethod
    def render(self) -> str:
        """Render the directive as a cron sub-expression."""
        pass

    def _outside(self, *values: int) -> bool:
        if self.limit is None:
            return False
        return any(not self.limit.contains(v) for v in values)

    def _require_target(self, *allowed: CronField):
        if self.target not in allowed:
            names = ", ".join(f.value for f in allowed)
            raise ValueError(
                f"{type(self).__name__} can't target '{self.target.value}' (allowed: {names})"
            )


@dataclass(frozen=True)
class Every(FieldDirective):
    def render(self) -> str:
        return constants.EVERY


@dataclass(frozen=True)
class Range(FieldDirective):
    begin: int
    end: int

    def out_of_range(self) -> bool:
        return self._outside(self.begin, self.end)

    def render(self) -> str:
        # Week ranges use the step separator rather than a dash
        if self.target is CronField.WEEK:
            return f"{self.begin}{constants.STEP_SEPARATOR}{self.end}"
        return f"{self.begin}{constants.RANGE_SEPARATOR}{self.end}"


@dataclass(frozen=True)
class Interval(FieldDirective):
    """Start at ``start`` and fire every ``step`` units.

    On the week field the pair means the ``start``-th occurrence (1-4) of
    weekday ``step`` within the month.
    """

    start: int
    step: int

    def out_of_range(self) -> bool:
        if self.target is CronField.WEEK:
            if not 1 <= self.start <= constants.MAX_WEEKDAY_OCCURRENCE:
                return True
            return self._outside(self.step)
        return self._outside(self.start, self.step)

    def render(self) -> str:
        if self.target is CronField.WEEK:
            return f"{self.start}{constants.NTH_SEPARATOR}{self.step}"
        return f"{self.start}{constants.STEP_SEPARATOR}{self.step}"


@dataclass(frozen=True)
class Custom(FieldDirective):
    """Explicit list of values, rendered in the order given."""

    values: tuple[int, ...] = ()

    def out_of_range(self) -> bool:
        return self._outside(*self.values)

    def render(self) -> str:
        if not self.values:
            return constants.EVERY
        return constants.LIST_SEPARATOR.join(str(v) for v in self.values)


@dataclass(frozen=True)
class NoDesignate(FieldDirective):
    def __post_init__(self):
        self._require_target(*NO_DESIGNATE_FIELDS)

    def render(self) -> str:
        if self.target is CronField.YEAR:
            return ""
        return constants.NO_DESIGNATE


@dataclass(frozen=True)
class NearestWorkday(FieldDirective):
    day: int

    def __post_init__(self):
        self._require_target(CronField.DAY)

    def out_of_range(self) -> bool:
        return self.day > 0 and self._outside(self.day)

    def render(self) -> str:
        if self.day <= 0:
            return constants.EVERY
        return f"{self.day}{constants.WORKDAY}"


@dataclass(frozen=True)
class LastDay(FieldDirective):
    def __post_init__(self):
        self._require_target(CronField.DAY)

    def render(self) -> str:
        return constants.LAST


@dataclass(frozen=True)
class LastWeekday(FieldDirective):
    weekday: int

    def __post_init__(self):
        self._require_target(CronField.WEEK)

    def out_of_range(self) -> bool:
        return self.weekday > 0 and self._outside(self.weekday)

    def render(self) -> str:
        if self.weekday <= 0:
            return constants.EVERY
        return f"{self.weekday}{constants.LAST}"


def every(field: CronField) -> FieldDirective:
    """Every value of the field."""
    return Every(field)


def range_of(field: CronField, begin: int, end: int) -> FieldDirective:
    """Values from begin to end, inclusive."""
    return Range(field, begin, end)


def interval(field: CronField, start: int, step: int) -> FieldDirective:
    """Every ``step`` units starting at ``start``.

    For ``CronField.WEEK`` this is the ``start``-th occurrence of weekday
    ``step`` in the month, with ``start`` in 1-4.
    """
    return Interval(field, start, step)


def custom(field: CronField, values: Iterable[int]) -> FieldDirective:
    """Explicit values, kept in input order without sorting or de-duplication."""
    return Custom(field, tuple(values))


def not_designated(field: CronField) -> FieldDirective | None:
    """Leave a field unspecified.

    Only day, week and year may be left unspecified.

    Returns:
        The directive, or None when the field can't be left unspecified.
        Passing that None to a builder is reported as an invalid condition.
    """
    if field not in NO_DESIGNATE_FIELDS:
        return None
    return NoDesignate(field)


def nearest_workday(day: int) -> FieldDirective:
    """Workday nearest to the given day of the month (1-31)."""
    return NearestWorkday(CronField.DAY, day)


def last_day() -> FieldDirective:
    """Last day of the month."""
    return LastDay(CronField.DAY)


def last_weekday(weekday: int) -> FieldDirective:
    """Last given weekday of the month (1-7, 1 is Sunday)."""
    return LastWeekday(CronField.WEEK, weekday)


def at_time(timestr: str) -> list[FieldDirective]:
    """Pin hour, minute and second to a 24-hour clock time.

    Args:
        timestr: Time formatted as "HH:MM:SS", e.g. "12:20:00"

    Returns:
        Hour, minute and second directives, in that order

    Raises:
        ValueError: If the string is not three colon-separated integers
    """
    parts = timestr.strip().split(":")
    if len(parts) != 3:
        raise ValueError(
            f"Invalid time '{timestr}'. Expected HH:MM:SS, got {len(parts)} parts"
        )

    try:
        hour, minute, second = (int(p) for p in parts)
    except ValueError:
        raise ValueError(f"Invalid time '{timestr}'. Components must be integers") from None

    return [
        custom(CronField.HOUR, [hour]),
        custom(CronField.MINUTE, [minute]),
        custom(CronField.SECOND, [second]),
    ]
