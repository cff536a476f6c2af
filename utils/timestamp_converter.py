import math
from datetime import datetime


DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"

MIN_TIMESTAMP = 0
MAX_TIMESTAMP = 4102444800  # 2100-01-01 00:00:00 UTC

INVALID_FORMAT_MESSAGE = "Invalid timestamp format"
OUT_OF_RANGE_MESSAGE = "Timestamp out of range"


def parse_timestamp(text, milliseconds=True):
    """Return the Unix time in seconds described by *text*.

    Raises ``ValueError`` for non-numeric input or values outside
    1970-01-01 .. 2100-01-01.
    """
    text = str(text).strip()
    # float() also takes digit-group underscores such as "1_000"
    if "_" in text:
        raise ValueError(INVALID_FORMAT_MESSAGE)
    try:
        value = float(text)
    except ValueError as exc:
        raise ValueError(INVALID_FORMAT_MESSAGE) from exc
    if not math.isfinite(value):
        raise ValueError(INVALID_FORMAT_MESSAGE)

    seconds = value / 1000.0 if milliseconds else value
    if seconds < MIN_TIMESTAMP or seconds > MAX_TIMESTAMP:
        raise ValueError(OUT_OF_RANGE_MESSAGE)
    return seconds


def convert_timestamp(text, milliseconds=True, tz=None) -> str:
    if not text:
        return ""
    seconds = parse_timestamp(text, milliseconds=milliseconds)
    # tz=None renders in the local time zone
    return datetime.fromtimestamp(seconds, tz).strftime(DISPLAY_FORMAT)


def current_time_reference(now=None, tz=None):
    """Formatted current date and the current epoch in milliseconds."""
    if now is None:
        now = datetime.now(tz)
    elif tz is not None:
        now = now.astimezone(tz)
    millis = int(now.timestamp() * 1000)
    return now.strftime(DISPLAY_FORMAT), str(millis)
