"""Template filters for taskfrontend views."""

from datetime import datetime
from typing import Optional

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_govuk_date_time(iso_string: Optional[str]) -> str:
    """Format an ISO 8601 datetime in GOV.UK style, e.g. "7 December 2025 at 12pm".

    Midnight and midday are written out; minutes are shown only when non-zero
    ("2:30pm"). Timezone-aware values are shown in server local time.

    Args:
        iso_string: ISO 8601 datetime string

    Returns:
        Formatted string, "" for empty input, or the input unchanged if it
        cannot be parsed
    """
    if not iso_string:
        return ""

    value = iso_string
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        return iso_string
    if moment.tzinfo is not None:
        moment = moment.astimezone()

    if moment.hour == 0 and moment.minute == 0:
        time_str = "midnight"
    elif moment.hour == 12 and moment.minute == 0:
        time_str = "midday"
    else:
        hour12 = moment.hour % 12 or 12
        suffix = "am" if moment.hour < 12 else "pm"
        if moment.minute == 0:
            time_str = f"{hour12}{suffix}"
        else:
            time_str = f"{hour12}:{moment.minute:02d}{suffix}"

    return f"{moment.day} {MONTH_NAMES[moment.month - 1]} {moment.year} at {time_str}"
