"""Human-readable uptime and severity classification."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from dockps_common import CRITICAL_UPTIME, RUNNING_STATE, WARNING_UPTIME, Severity

_FRACTION_RE = re.compile(r"\.(\d+)")


def parse_started_at(text: str) -> datetime:
    """Parse Docker's RFC 3339 ``State.StartedAt`` (nanosecond precision).

    Raises ``ValueError`` when the text is not a timestamp.
    """
    value = text.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    # datetime only keeps microseconds
    value = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1)
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def human_uptime(uptime: timedelta) -> str:
    """Format an uptime as ``Up 1d1h`` / ``Up 2h5m`` / ``Up 3m7s`` / ``Up 9s``."""
    total = max(int(uptime.total_seconds()), 0)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours >= 24:
        days, hours = divmod(hours, 24)
        return f"Up {days}d{hours}h" if hours else f"Up {days}d"
    if hours >= 1:
        return f"Up {hours}h{minutes}m" if minutes else f"Up {hours}h"
    if minutes:
        return f"Up {minutes}m{seconds}s"
    return f"Up {seconds}s"


def classify_severity(state: str, uptime: timedelta) -> Severity:
    """Bucket a container for colouring; anything not running is critical."""
    if state != RUNNING_STATE or uptime < CRITICAL_UPTIME:
        return Severity.CRITICAL
    if uptime < WARNING_UPTIME:
        return Severity.WARNING
    return Severity.NOMINAL
