import os
from dataclasses import dataclass

from cronbuilder.fields import FieldLimit


@dataclass
class Config:
    """Builder configuration.

    The year field has no enforced range unless both bounds are given.

    Args:
        year_min: Lowest year accepted in year directives
        year_max: Highest year accepted in year directives
    """
    year_min: int | None = None
    year_max: int | None = None

    def __post_init__(self):
        """Validate builder configuration."""
        if (self.year_min is None) != (self.year_max is None):
            raise ValueError("year_min and year_max must be set together")

        if self.year_min is not None and self.year_min > self.year_max:
            raise ValueError("year_min must not be greater than year_max")

    @property
    def year_limit(self) -> FieldLimit | None:
        if self.year_min is None:
            return None
        return FieldLimit(self.year_min, self.year_max)

    @classmethod
    def from_env(cls, prefix: str = "CRONBUILDER_") -> "Config":
        """Load configuration from environment variables."""

        def get_int(key: str) -> int | None:
            value = os.getenv(f"{prefix}{key.upper()}")
            if value is None or value == "":
                return None
            return int(value)

        return cls(year_min=get_int("year_min"), year_max=get_int("year_max"))
