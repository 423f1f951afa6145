"""Branch staleness policy."""

from datetime import UTC, datetime

from dateutil.relativedelta import relativedelta


def _as_aware(value: datetime) -> datetime:
    # Naive times are assumed to be UTC so they compare with git's offset-aware dates
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def staleness_cutoff(now: datetime, threshold_months: int) -> datetime:
    """Return the instant ``threshold_months`` calendar months before ``now``.

    The day of month is clamped, so 31 March minus one month is the last day
    of February.
    """
    return _as_aware(now) - relativedelta(months=threshold_months)


def is_stale(timestamp: datetime | None, now: datetime, threshold_months: int) -> bool:
    """Decide whether a last-commit time is older than the threshold.

    Args:
        timestamp: Last commit time, or None if unknown
        now: Reference time
        threshold_months: Age threshold in calendar months

    Returns:
        True iff the timestamp is strictly earlier than the cutoff.
        Unknown timestamps are never stale.
    """
    if timestamp is None:
        return False
    return _as_aware(timestamp) < staleness_cutoff(now, threshold_months)


class StalenessPolicy:
    """Staleness predicate bound to a configured threshold."""

    def __init__(self, threshold_months: int) -> None:
        """Initialize the policy.

        Args:
            threshold_months: Age threshold in calendar months

        Raises:
            ValueError: If the threshold is below one month
        """
        if threshold_months < 1:
            msg = f"threshold_months must be at least 1, got {threshold_months}"
            raise ValueError(msg)
        self.threshold_months = threshold_months

    def cutoff(self, now: datetime) -> datetime:
        return staleness_cutoff(now, self.threshold_months)

    def is_stale(self, timestamp: datetime | None, now: datetime) -> bool:
        return is_stale(timestamp, now, self.threshold_months)
