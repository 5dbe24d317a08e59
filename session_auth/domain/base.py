from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the form stored in DateTime columns"""
    return datetime.now(UTC).replace(tzinfo=None)


def normalize_email(email: str) -> str:
    return email.strip().lower()
