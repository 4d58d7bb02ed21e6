"""Custom exceptions for cronbuilder."""

from cronbuilder.fields import CronField, FieldLimit


class CronBuilderError(Exception):
    pass


class InvalidDirectiveError(CronBuilderError):
    """Raised when a supplied directive is missing or not a directive."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(
            f"Condition at index [{position}] is invalid, please check your condition"
        )


class OutOfRangeError(CronBuilderError):
    """Raised when a directive holds a value outside its field's limits."""

    def __init__(self, field: CronField, limit: FieldLimit | None = None):
        self.field = field
        self.limit = limit
        bounds = f" [{limit.min}, {limit.max}]" if limit is not None else ""
        super().__init__(f"Field '{field.value}' condition out of range{bounds}")


class DayWeekConflictError(CronBuilderError):
    """Raised when day-of-month and day-of-week are both (or neither) designated."""

    def __init__(self, day_spec: str, week_spec: str):
        self.day_spec = day_spec
        self.week_spec = week_spec
        super().__init__(
            f"Day and week can't be set at the same time (day='{day_spec}', week='{week_spec}')"
        )
