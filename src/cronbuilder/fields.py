"""Cron field identifiers and their legal value ranges."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cronbuilder.config import Config


class CronField(Enum):
    """Position of a field in a seven-field cron expression."""
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    WEEK = "week"
    YEAR = "year"


@dataclass(frozen=True)
class FieldLimit:
    """Inclusive bounds for the values of one field."""
    min: int
    max: int

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"Invalid limit: min {self.min} is greater than max {self.max}")

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


# Week counts 1 as Sunday
FIELD_LIMITS = MappingProxyType({
    CronField.SECOND: FieldLimit(0, 59),
    CronField.MINUTE: FieldLimit(0, 59),
    CronField.HOUR: FieldLimit(0, 23),
    CronField.DAY: FieldLimit(1, 31),
    CronField.MONTH: FieldLimit(1, 12),
    CronField.WEEK: FieldLimit(1, 7),
    CronField.YEAR: None,
})


def get_field_limit(field: CronField, config: "Config | None" = None) -> FieldLimit | None:
    """Look up the legal range for a field.

    Args:
        field: Field to look up
        config: Optional configuration supplying year bounds

    Returns:
        The field's limit, or None when the field is unbounded
    """
    if field is CronField.YEAR and config is not None:
        return config.year_limit
    return FIELD_LIMITS[field]
