from copy import deepcopy
import re
from typing import Any, List, Sequence
from eventhub.errors import ValidationError
from .base import Normalizer
from .types import Record

# Required text fields of an event, checked in this order
EVENT_STRING_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)
EVENT_ARRAY_FIELDS = ("agenda", "tags")

# local@domain.tld, no whitespace, one "@"
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class RequiredStringsNormalizer(Normalizer):
    """Trims each listed field; a missing, non-string or blank value rejects the record."""
    def __init__(self, fields: Sequence[str]):
        self.fields = tuple(fields)

    def normalize_record(self, rec: Record) -> Record:
        r = deepcopy(rec)
        for field in self.fields:
            r[field] = required_string(field, r.get(field))
        return r


class RequiredArraysNormalizer(Normalizer):
    """Each listed field must be a non-empty list of strings that stay non-empty after trimming."""
    def __init__(self, fields: Sequence[str]):
        self.fields = tuple(fields)

    def normalize_record(self, rec: Record) -> Record:
        r = deepcopy(rec)
        for field in self.fields:
            r[field] = required_string_list(field, r.get(field))
        return r


class EmailNormalizer(Normalizer):
    def normalize_record(self, rec: Record) -> Record:
        r = deepcopy(rec)
        r["email"] = norm_email(r.get("email"))
        return r


# --- Individual field helpers ---

def trim_or_empty(v: Any) -> str:
    """Strip strings; anything else counts as empty."""
    return v.strip() if isinstance(v, str) else ""

def required_string(field: str, v: Any) -> str:
    value = trim_or_empty(v)
    if not value:
        raise ValidationError(field, "required and empty")
    return value

def required_string_list(field: str, v: Any) -> List[str]:
    if not isinstance(v, (list, tuple)) or not v:
        raise ValidationError(field, "required and empty")
    items = [trim_or_empty(item) for item in v]
    if not all(items):
        raise ValidationError(field, "must contain only non-empty strings")
    return items

def norm_email(v: Any) -> str:
    """Trim, lower-case and shape-check an email address."""
    email = trim_or_empty(v).lower()
    if not email or not EMAIL_RE.fullmatch(email):
        raise ValidationError("email", "invalid address")
    return email
