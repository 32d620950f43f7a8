"""Test fakes for testing without a real host application.

Example:
    from tests.fakes import SAMPLE_METADATA, MetadataValues, make_sample_resources

    decoder = ManifestMetadata(
        StaticMetadataProvider(SAMPLE_METADATA),
        make_sample_resources(),
    )
    decoder.bind(values := MetadataValues())
"""

from .resources import (
    ANIM_FADE,
    BOOL_FALSE,
    BOOL_TRUE,
    COLOR_BLACK,
    DIMEN_SAMPLE,
    FADE_ANIMATION,
    INT_ARRAY_PRIMES,
    INTEGER_ANSWER,
    SAMPLE_METADATA,
    STRING_HELLO,
    RecordingResourceResolver,
    make_sample_resources,
)
from .targets import (
    MetadataValues,
    NamedByField,
    OtherWorker,
    SampleWorker,
    SetterOnly,
    Unannotated,
    WorkerConfig,
)

__all__ = [
    "ANIM_FADE",
    "BOOL_FALSE",
    "BOOL_TRUE",
    "COLOR_BLACK",
    "DIMEN_SAMPLE",
    "FADE_ANIMATION",
    "INT_ARRAY_PRIMES",
    "INTEGER_ANSWER",
    "SAMPLE_METADATA",
    "STRING_HELLO",
    "RecordingResourceResolver",
    "make_sample_resources",
    "MetadataValues",
    "NamedByField",
    "OtherWorker",
    "SampleWorker",
    "SetterOnly",
    "Unannotated",
    "WorkerConfig",
]
