from copy import deepcopy
from typing import Callable, List, Optional
from .base import Normalizer
from .types import Record
from .rules import (
    EVENT_ARRAY_FIELDS,
    EVENT_STRING_FIELDS,
    EmailNormalizer,
    RequiredArraysNormalizer,
    RequiredStringsNormalizer,
)
from .slug import SlugNormalizer
from .temporal import DateNormalizer, TimeNormalizer

class NormalizerPipeline(Normalizer):
    """
    A chain of normalizers.
    Each stage takes the output of the previous stage. The first stage to
    raise ValidationError stops the chain, so the caller never sees a
    half-normalized record.
    """
    def __init__(self, stages: List[Normalizer]):
        self.stages = stages

    def normalize_record(self, rec: Record) -> Record:
        out = deepcopy(rec)  # Don't mutate the input
        for stage in self.stages:
            out = stage.normalize_record(out)
        return out

def get_event_normalizer(
    previous: Optional[Record] = None,
    load_previous: Optional[Callable[[], Optional[Record]]] = None,
) -> Normalizer:
    """
    Event chain: text fields -> list fields -> slug -> date -> time.
    `previous` is the stored version of the event, if any; it decides whether
    the slug is recomputed. `load_previous` fetches it lazily when the slug
    stage is reached.
    """
    return NormalizerPipeline([
        RequiredStringsNormalizer(EVENT_STRING_FIELDS),
        RequiredArraysNormalizer(EVENT_ARRAY_FIELDS),
        SlugNormalizer(previous, load_previous),
        DateNormalizer(),
        TimeNormalizer(),
    ])

def get_booking_normalizer() -> Normalizer:
    # The event reference check needs the database and lives in eventhub.commit
    return NormalizerPipeline([EmailNormalizer()])
