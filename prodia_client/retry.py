"""
Retry classification and backoff for job submission.

Every attempt's status code is fed through ``transition``, which moves the
submission between four states:

    ATTEMPTING        -> another attempt follows after a backoff pause
    SUCCESS           -> 2xx, stop immediately
    TERMINAL_FAILURE  -> 400/401/403, never retried
    EXHAUSTED         -> error or retry budget used up

429 responses spend the ``retries`` budget (``max_retries``); every other
non-2xx status spends the ``errors`` budget (``max_errors``).
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Mapping, Optional, Tuple

TERMINAL_STATUSES = frozenset({400, 401, 403})
CAPACITY_STATUS = 429
DEFAULT_RETRY_AFTER = 1.0


class AttemptState(str, Enum):
    """Where a submission stands after an attempt."""
    ATTEMPTING = "attempting"
    SUCCESS = "success"
    TERMINAL_FAILURE = "terminal_failure"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class RetryCounters:
    """Failure counters owned by a single submission."""
    errors: int = 0
    retries: int = 0


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def within_budget(
    counters: RetryCounters,
    max_errors: int,
    max_retries: Optional[int],
) -> bool:
    """True while neither counter has gone past its budget."""
    if counters.errors > max_errors:
        return False
    if max_retries is not None and counters.retries > max_retries:
        return False
    return True


def transition(
    status_code: int,
    counters: RetryCounters,
    max_errors: int,
    max_retries: Optional[int],
) -> Tuple[AttemptState, RetryCounters]:
    """
    Classify one attempt.

    Args:
        status_code: HTTP status of the attempt
        counters: Counters before the attempt
        max_errors: Non-429 failures tolerated
        max_retries: 429 responses tolerated (None = unbounded)

    Returns:
        The next state and the updated counters
    """
    if is_success(status_code):
        return AttemptState.SUCCESS, counters

    if status_code in TERMINAL_STATUSES:
        return AttemptState.TERMINAL_FAILURE, counters

    if status_code == CAPACITY_STATUS:
        counters = replace(counters, retries=counters.retries + 1)
    else:
        counters = replace(counters, errors=counters.errors + 1)

    if within_budget(counters, max_errors, max_retries):
        return AttemptState.ATTEMPTING, counters
    return AttemptState.EXHAUSTED, counters


def retry_after_seconds(headers: Mapping[str, str]) -> float:
    """
    Seconds to pause before the next attempt.

    Uses the server's Retry-After hint; falls back to one second when the
    header is missing, not a number, or not positive.
    """
    value = headers.get("Retry-After")
    if value is None:
        return DEFAULT_RETRY_AFTER

    try:
        delay = float(value)
    except ValueError:
        return DEFAULT_RETRY_AFTER

    # NaN compares false, so it falls through to the default as well
    if not delay > 0 or delay == float("inf"):
        return DEFAULT_RETRY_AFTER
    return delay


__all__ = [
    "AttemptState",
    "RetryCounters",
    "TERMINAL_STATUSES",
    "CAPACITY_STATUS",
    "DEFAULT_RETRY_AFTER",
    "is_success",
    "within_budget",
    "transition",
    "retry_after_seconds",
]
