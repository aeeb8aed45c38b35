from cardindex.models.card_index import CardIndex, CompressedPrinting
from cardindex.models.failure import (
    BulkDataError,
    FailureDetail,
    FailureKind,
    IndexSanityError,
    KnownError,
    MalformedRecordError,
    MissingSourceError,
)
from cardindex.models.printing import CardSet, ImageUris, Printing
from cardindex.models.raw_card import RawCard, RawCardFace, RawRecord

__all__ = [
    "BulkDataError",
    "CardIndex",
    "CardSet",
    "CompressedPrinting",
    "FailureDetail",
    "FailureKind",
    "ImageUris",
    "IndexSanityError",
    "KnownError",
    "MalformedRecordError",
    "MissingSourceError",
    "Printing",
    "RawCard",
    "RawCardFace",
    "RawRecord",
]
