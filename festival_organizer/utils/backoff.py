"""Exponential backoff policy for retrying throttled HTTP calls.

A :class:`ExponentialBackOff` is an immutable policy; each retry loop calls
:meth:`ExponentialBackOff.start` to get its own :class:`BackOffExecution`,
which hands out successively longer wait intervals until the stop condition
is reached.

Interval sequence with the defaults (2.0 s, x1.5, capped at 30 s)::

    2.0, 3.0, 4.5, 6.75, 10.125, 15.19, 22.78, 30.0, 30.0, ...

Elapsed time is the sum of the intervals handed out so far, not wall-clock
time, so the number of retries a policy allows is deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_INITIAL_INTERVAL = 2.0
DEFAULT_MULTIPLIER = 1.5
DEFAULT_MAX_INTERVAL = 30.0
DEFAULT_MAX_ELAPSED_TIME = 120.0


@dataclass(frozen=True)
class ExponentialBackOff:
    """Exponential backoff policy.

    Attributes
    ----------
    initial_interval:
        First wait interval in seconds.
    multiplier:
        Growth factor applied to the previous interval.
    max_interval:
        Upper bound for a single interval in seconds.
    max_elapsed_time:
        Once the accumulated intervals reach this many seconds the
        execution stops.
    max_attempts:
        Optional cap on the number of intervals handed out.
    """

    initial_interval: float = DEFAULT_INITIAL_INTERVAL
    multiplier: float = DEFAULT_MULTIPLIER
    max_interval: float = DEFAULT_MAX_INTERVAL
    max_elapsed_time: float = DEFAULT_MAX_ELAPSED_TIME
    max_attempts: int | None = None

    def __post_init__(self) -> None:
        if self.initial_interval < 0:
            raise ValueError("initial_interval must not be negative")
        if self.multiplier < 1.0:
            raise ValueError("multiplier must be >= 1.0")
        if self.max_interval < self.initial_interval:
            raise ValueError("max_interval must be >= initial_interval")
        if self.max_attempts is not None and self.max_attempts < 0:
            raise ValueError("max_attempts must not be negative")

    def start(self) -> BackOffExecution:
        """Begin a new backoff sequence."""
        return BackOffExecution(self)


class BackOffExecution:
    """A single run through an :class:`ExponentialBackOff` sequence.

    ``next_back_off()`` returns the next interval in seconds, or ``None``
    (the STOP sentinel) when no further retry should be attempted.
    """

    STOP = None

    def __init__(self, policy: ExponentialBackOff) -> None:
        self._policy = policy
        self._current_interval: float | None = None
        self._elapsed = 0.0
        self._attempts = 0

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def attempts(self) -> int:
        return self._attempts

    def next_back_off(self) -> float | None:
        policy = self._policy
        if policy.max_attempts is not None and self._attempts >= policy.max_attempts:
            return self.STOP
        if self._elapsed >= policy.max_elapsed_time:
            return self.STOP

        interval = self._compute_next_interval()
        self._elapsed += interval
        self._attempts += 1
        return interval

    def _compute_next_interval(self) -> float:
        policy = self._policy
        if self._current_interval is None:
            self._current_interval = policy.initial_interval
        else:
            self._current_interval = min(
                self._current_interval * policy.multiplier, policy.max_interval
            )
        return self._current_interval
