"""cronbuilder - build seven-field cron expressions from validated directives.

Basic usage:
    from cronbuilder import CronExprBuilder, CronField
    from cronbuilder.directives import custom, interval, not_designated

    builder = CronExprBuilder()
    builder.set_condition(
        custom(CronField.SECOND, [0]),
        interval(CronField.MINUTE, 0, 5),
        custom(CronField.HOUR, [9, 12, 18]),
        not_designated(CronField.DAY),
        interval(CronField.WEEK, 2, 6),
    )
    builder.generate()  # "0 0/5 9,12,18 ? * 2#6 "

Invalid directives raise errors from the cronbuilder.exceptions module:
    builder.set_condition(custom(CronField.DAY, [32]))
    builder.generate()  # raises OutOfRangeError
"""

__version__ = "0.1.0"

from cronbuilder.builder import CronExprBuilder
from cronbuilder.config import Config
from cronbuilder.fields import CronField, FieldLimit, get_field_limit
from cronbuilder.directives import (
    FieldDirective,
    at_time,
    custom,
    every,
    interval,
    last_day,
    last_weekday,
    nearest_workday,
    not_designated,
    range_of,
)
from cronbuilder.exceptions import (
    CronBuilderError,
    InvalidDirectiveError,
    OutOfRangeError,
    DayWeekConflictError,
)

__all__ = [
    # Builder
    "CronExprBuilder",
    # Configuration
    "Config",
    # Fields
    "CronField",
    "FieldLimit",
    "get_field_limit",
    # Directives
    "FieldDirective",
    "every",
    "range_of",
    "interval",
    "custom",
    "not_designated",
    "nearest_workday",
    "last_day",
    "last_weekday",
    "at_time",
    # Exceptions
    "CronBuilderError",
    "InvalidDirectiveError",
    "OutOfRangeError",
    "DayWeekConflictError",
]
