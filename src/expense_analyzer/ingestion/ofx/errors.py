"""Failure reasons reported by the OFX engine."""

EMPTY_INPUT = "Input is empty."
INVALID_FORMAT = "Invalid OFX format."
UNSUPPORTED_FORMAT = "Unsupported OFX format."
PREPROCESS_FAILED = "Failed to preprocess SGML to XML."
NO_STATEMENTS = "No STMTTRNRS section found."
PARSING_FAILED_PREFIX = "Parsing failed: "


class OfxError(Exception):
    """Base class for stage failures inside the OFX pipeline.

    The message is the caller-facing reason string.
    """

    reason: str = "OFX error."

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(reason or self.reason)

    @property
    def message(self) -> str:
        return str(self)


class EmptyInputError(OfxError):
    reason = EMPTY_INPUT


class OfxMarkerNotFoundError(OfxError):
    reason = INVALID_FORMAT


class OfxHeaderError(OfxError):
    """Header present but does not match the supported profile."""

    reason = UNSUPPORTED_FORMAT

    def __init__(self, mismatches: list[str] | None = None) -> None:
        super().__init__()
        self.mismatches = mismatches or []


class TranscodeError(OfxError):
    """A body line is neither a tag nor a tag followed by a value."""

    reason = PREPROCESS_FAILED

    def __init__(self, line_number: int | None = None, line: str | None = None) -> None:
        super().__init__()
        self.line_number = line_number
        self.line = line


class StatementNotFoundError(OfxError):
    reason = NO_STATEMENTS


def parsing_failed(exc: BaseException) -> str:
    """Reason string for an XML parse or unexpected internal failure."""
    return f"{PARSING_FAILED_PREFIX}{exc}"
