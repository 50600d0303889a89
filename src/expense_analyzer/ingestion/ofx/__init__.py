"""OFX 1.x (SGML) bank statement engine."""

from .decoders import FieldDiagnostics
from .errors import (
    EMPTY_INPUT,
    INVALID_FORMAT,
    NO_STATEMENTS,
    PARSING_FAILED_PREFIX,
    PREPROCESS_FAILED,
    UNSUPPORTED_FORMAT,
    OfxError,
)
from .header import REQUIRED_HEADER, split_header, validate_header
from .parser import OfxParseResult, parse_ofx
from .transcoder import sgml_to_xml

__all__ = [
    "EMPTY_INPUT",
    "INVALID_FORMAT",
    "NO_STATEMENTS",
    "PARSING_FAILED_PREFIX",
    "PREPROCESS_FAILED",
    "UNSUPPORTED_FORMAT",
    "REQUIRED_HEADER",
    "FieldDiagnostics",
    "OfxError",
    "OfxParseResult",
    "parse_ofx",
    "sgml_to_xml",
    "split_header",
    "validate_header",
]
