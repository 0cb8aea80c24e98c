from .pipeline import get_event_normalizer, get_booking_normalizer, NormalizerPipeline
from .rules import RequiredStringsNormalizer, RequiredArraysNormalizer, EmailNormalizer
from .slug import SlugNormalizer, slugify
from .temporal import DateNormalizer, TimeNormalizer
from .types import RecordKind, Record
from .base import Normalizer

__all__ = [
    "get_event_normalizer",
    "get_booking_normalizer",
    "NormalizerPipeline",
    "RequiredStringsNormalizer",
    "RequiredArraysNormalizer",
    "EmailNormalizer",
    "SlugNormalizer",
    "slugify",
    "DateNormalizer",
    "TimeNormalizer",
    "RecordKind",
    "Record",
    "Normalizer",
]
