from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """Normalise a timestamp to aware UTC. Naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
