"""Date range selection model."""

from datetime import date

from pydantic import BaseModel, ConfigDict


class DateRange(BaseModel):
    """Optional inclusive date bounds.

    Ordering of ``start`` and ``end`` is not validated here; an inverted
    range simply matches nothing.
    """

    start: date | None = None
    end: date | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_open(self) -> bool:
        """True when neither bound is set."""
        return self.start is None and self.end is None

    @property
    def is_inverted(self) -> bool:
        """True when both bounds are set and start is after end."""
        return self.start is not None and self.end is not None and self.start > self.end

    def contains(self, day: date) -> bool:
        """Check whether a day satisfies both bounds."""
        return (self.start is None or day >= self.start) and (self.end is None or day <= self.end)
