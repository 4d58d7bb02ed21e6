"""Seven-field cron expression builder.

Fields are rendered in order: second minute hour day month week year.

Example:
    from cronbuilder import CronExprBuilder, CronField
    from cronbuilder.directives import at_time, last_day

    builder = CronExprBuilder()
    builder.set_condition(*at_time("12:20:00"), last_day())
    builder.generate()  # "0 20 12 L * ? "
"""

import logging

from cronbuilder import constants
from cronbuilder.config import Config
from cronbuilder.directives import Every, FieldDirective, NoDesignate
from cronbuilder.exceptions import (
    DayWeekConflictError,
    InvalidDirectiveError,
    OutOfRangeError,
)
from cronbuilder.fields import CronField, FieldLimit, get_field_limit

logger = logging.getLogger("cronbuilder")

# Fields left unspecified by default; everything else defaults to every value
_DEFAULT_NO_DESIGNATE = (CronField.WEEK, CronField.YEAR)


class CronExprBuilder:
    """Holds one directive per field and renders them into a cron expression.

    Not thread-safe; serialize access if an instance is shared.
    """

    def __init__(self, config: Config | None = None):
        """Initialize builder with default directives.

        Args:
            config: Optional configuration (year bounds)
        """
        self.config = config or Config()
        self._limits: dict[CronField, FieldLimit | None] = {
            field: get_field_limit(field, self.config) for field in CronField
        }
        self._directives: dict[CronField, FieldDirective] = {}

        for field in CronField:
            if field in _DEFAULT_NO_DESIGNATE:
                default = NoDesignate(field)
            else:
                default = Every(field)
            self._directives[field] = default.stamped(self._limits[field])

    def apply(self, directive: FieldDirective, position: int = 1):
        """Replace the directive for the directive's target field.

        The field's limit stored in this builder is attached to the directive
        before it is stored.

        Args:
            directive: Directive to apply
            position: 1-based position reported if the directive is invalid

        Raises:
            InvalidDirectiveError: If directive is None or not a directive
        """
        if not isinstance(directive, FieldDirective):
            logger.warning(f"Rejected condition at index [{position}]: {directive!r}")
            raise InvalidDirectiveError(position)

        field = directive.target
        self._directives[field] = directive.stamped(self._limits[field])
        logger.debug(f"Applied {type(directive).__name__} to {field.value}")

    def set_condition(self, *directives: FieldDirective | None) -> "CronExprBuilder":
        """Apply directives in order; for the same field the last one wins.

        Args:
            *directives: Directives to apply

        Returns:
            This builder, for chaining

        Raises:
            InvalidDirectiveError: If a directive is None or not a directive.
                Directives before it remain applied.
        """
        for i, directive in enumerate(directives, start=1):
            self.apply(directive, i)
        return self

    def directive_for(self, field: CronField) -> FieldDirective:
        """Current directive for a field."""
        return self._directives[field]

    def generate(self) -> str:
        """Validate every field and render the expression.

        Returns:
            Seven space-separated sub-expressions

        Raises:
            OutOfRangeError: If a field's directive is outside its limits
            DayWeekConflictError: If day and week are both designated, or
                both left unspecified
        """
        specs = {field: self._render(field) for field in CronField}
        self._check_day_and_week(specs[CronField.DAY], specs[CronField.WEEK])

        expression = " ".join(specs.values())
        logger.debug(f"Generated cron expression '{expression}'")
        return expression

    def _render(self, field: CronField) -> str:
        directive = self._directives[field]
        if directive.out_of_range():
            logger.warning(f"Condition for {field.value} out of range: {directive!r}")
            raise OutOfRangeError(field, directive.limit)
        return directive.render()

    def _check_day_and_week(self, day_spec: str, week_spec: str):
        # Exactly one of day and week must be left unspecified
        if (day_spec == constants.NO_DESIGNATE) != (week_spec == constants.NO_DESIGNATE):
            return
        raise DayWeekConflictError(day_spec, week_spec)
