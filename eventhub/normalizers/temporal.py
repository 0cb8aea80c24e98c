from copy import deepcopy
from datetime import date, datetime, timezone
import re
from typing import Any, Optional
from eventhub.errors import ValidationError
from .base import Normalizer
from .rules import trim_or_empty
from .types import Record

# Tried in order once ISO 8601 parsing has failed
DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)

TIME_RE = re.compile(r"([0-9]{1,2}):([0-9]{2})")


class DateNormalizer(Normalizer):
    """Rewrites `date` as YYYY-MM-DD (UTC)."""
    def normalize_record(self, rec: Record) -> Record:
        r = deepcopy(rec)
        r["date"] = norm_date(r.get("date"))
        return r


class TimeNormalizer(Normalizer):
    """Rewrites `time` as zero-padded 24h HH:MM."""
    def normalize_record(self, rec: Record) -> Record:
        r = deepcopy(rec)
        r["time"] = norm_time(r.get("time"))
        return r


def parse_date(z: Any) -> Optional[date]:
    """Parse ISO-ish or common textual dates; aware values are moved to UTC first."""
    s = trim_or_empty(z)
    if not s:
        return None
    dt: Optional[datetime] = None
    try:
        dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        for fmt in DATE_FORMATS:
            try:
                dt = datetime.strptime(s, fmt)
                break
            except ValueError:
                continue
    if dt is None:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.date()

def norm_date(z: Any) -> str:
    d = parse_date(z)
    if d is None:
        raise ValidationError("date", "invalid format")
    return d.isoformat()

def norm_time(z: Any) -> str:
    m = TIME_RE.fullmatch(trim_or_empty(z))
    if not m:
        raise ValidationError("time", "invalid format")
    hours, minutes = int(m.group(1)), int(m.group(2))
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise ValidationError("time", "out of range")
    return f"{hours:02d}:{minutes:02d}"
