import re
from copy import deepcopy
from typing import Callable, Optional

from eventhub.errors import ValidationError
from .base import Normalizer
from .types import Record

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """Lowercase, collapse every run of non [a-z0-9] chars to one dash, strip edge dashes."""
    s = title.lower().strip()
    s = _NON_SLUG_RUN.sub("-", s)
    return s.strip("-")


class SlugNormalizer(Normalizer):
    """
    Assigns `slug` from `title`.
    The slug is only recomputed when there is no stored record yet or the
    stored title differs; otherwise the stored slug is carried over.
    `load_previous` is called only when this stage runs, so a record that
    already failed an earlier stage never touches the database.
    """
    def __init__(
        self,
        previous: Optional[Record] = None,
        load_previous: Optional[Callable[[], Optional[Record]]] = None,
    ):
        self.previous = previous
        self.load_previous = load_previous

    def normalize_record(self, rec: Record) -> Record:
        r = deepcopy(rec)
        prev = self.previous
        if prev is None and self.load_previous is not None:
            prev = self.load_previous()
        if prev is None or prev.get("title") != r["title"] or not prev.get("slug"):
            r["slug"] = slugify(r["title"])
        else:
            r["slug"] = prev["slug"]
        if not r["slug"]:
            # all-punctuation titles would otherwise share the empty slug
            raise ValidationError("title", "does not yield a slug")
        return r
