"""Ingestion module for parsing statement files."""

from .base import BaseParser, ParseResult, ParserDetectionResult
from .ofx import OfxParseResult, parse_ofx
from .parsers import OfxFileParser

__all__ = [
    "BaseParser",
    "ParseResult",
    "ParserDetectionResult",
    "OfxParseResult",
    "OfxFileParser",
    "parse_ofx",
]
