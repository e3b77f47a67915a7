"""Core enumerations.

Key Types:
    - Environment: Deployment environment used to pick configuration defaults
    - SeriesStatus: Lifecycle of the series fetch state machine
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environment of the running process."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"

    @classmethod
    def from_str(cls, value: str) -> "Environment":
        """Parse an environment name (case-insensitive).

        Raises:
            ValueError: If the name is not a known environment
        """
        normalized = value.strip().lower()
        for env in cls:
            if env.value == normalized:
                return env
        raise ValueError(f"Unknown environment: {value!r}")


class SeriesStatus(str, Enum):
    """Series fetch lifecycle.

    ``IDLE`` until the first fetch, ``LOADING`` while a fetch is outstanding,
    then ``LOADED`` or ``FAILED`` depending on the last applied outcome.
    """

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"
