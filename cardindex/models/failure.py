"""
Failure classification for index builds.

Every failure that aborts a build is classified so the job can report it
in one structured line. There is no recovered-but-continued path: a
KnownError raised anywhere in the pipeline ends the run and no artifact
is written.
"""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input failures
    MALFORMED_RECORD = "malformed_record"
    MISSING_SOURCE = "missing_source"

    # Fetch failures
    EXTERNAL_API_ERROR = "external_api_error"

    # Output failures
    INVARIANT_VIOLATION = "invariant_violation"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the operator",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


def describe_record(record: Any) -> str:
    """Short identity string for a raw card dict or a Printing."""
    if isinstance(record, dict):
        ident = record.get("id")
        name = record.get("name")
        set_code = record.get("set")
        number = record.get("collector_number")
    else:
        ident = getattr(record, "id", None)
        name = getattr(record, "name", None)
        card_set = getattr(record, "set", None)
        set_code = getattr(card_set, "code", None)
        number = getattr(record, "set_number", None)

    return f"id={ident!r} name={name!r} set={set_code!r} number={number!r}"


class MalformedRecordError(KnownError):
    """
    Raised when a record is missing a field the build depends on.

    Always fatal. The message names the offending record.
    """

    def __init__(self, record: Any, reason: str):
        self.record = record
        self.reason = reason
        super().__init__(
            kind=FailureKind.MALFORMED_RECORD,
            message=f"Malformed card record ({describe_record(record)}): {reason}",
            suggestion="Re-download the bulk data; the source feed may be corrupt.",
        )


class BulkDataError(KnownError):
    """Raised when the bulk data listing or download fails."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.EXTERNAL_API_ERROR,
            message=message,
            detail=detail,
            suggestion="Check network access to the Scryfall API and retry.",
        )


class MissingSourceError(KnownError):
    """Raised when an input file the build needs does not exist."""

    def __init__(self, path: Path, suggestion: str | None = None):
        self.path = path
        super().__init__(
            kind=FailureKind.MISSING_SOURCE,
            message=f"Source file not found at {path}",
            suggestion=suggestion,
        )


class IndexSanityError(KnownError):
    """
    Raised when a built index fails its post-build checks.

    Carries every failed check so a single run reports all of them.
    """

    def __init__(self, failures: list[str]):
        self.failures = failures
        super().__init__(
            kind=FailureKind.INVARIANT_VIOLATION,
            message=f"Card index failed {len(failures)} sanity check(s)",
            detail="; ".join(failures),
        )
