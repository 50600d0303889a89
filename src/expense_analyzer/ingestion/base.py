"""Base classes for statement file parsers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from expense_analyzer.core.models import Transaction


@dataclass
class ParseResult:
    """Result of parsing a file."""

    transactions: list[Transaction]
    source_file_path: Path
    file_hash: str
    file_size: int
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0

    @property
    def record_count(self) -> int:
        return len(self.transactions)


@dataclass
class ParserDetectionResult:
    """Result of a lightweight parser relevance check."""

    matched: bool
    reason: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)


class BaseParser(ABC):
    """Abstract base class for all statement file parsers."""

    description: str = "Base parser"
    supported_formats: list[str] = []
    required_args: list[str] = []

    entity: str = "generic"
    entity_type: str = "statement"
    format: str = "unknown"

    example_input: Optional[str] = None
    field_mappings: Optional[dict[str, str]] = None
    parser_version: str = "1.0"

    @abstractmethod
    def parse(self, file_path: Path) -> ParseResult:
        """Parse a file and return its transactions.

        Args:
            file_path: Path to file to parse

        Returns:
            ParseResult containing transactions and metadata

        Raises:
            Should not raise exceptions - accumulate errors in ParseResult.errors
        """
        pass

    @abstractmethod
    def can_parse(self, file_path: Path) -> bool:
        """Check if this parser can handle the given file.

        This should be a fast validation without full parsing.
        """
        pass

    def detect(self, file_path: Path) -> ParserDetectionResult:
        """Uniform detection interface; delegates to can_parse by default."""
        try:
            matched = self.can_parse(file_path)
            return ParserDetectionResult(
                matched=matched,
                reason="can_parse",
            )
        except Exception as exc:  # noqa: BLE001
            return ParserDetectionResult(
                matched=False,
                reason=f"detect_error:{exc}",
            )

    def get_metadata(self) -> dict[str, Any]:
        """Get parser metadata for listings."""
        return {
            "description": self.description,
            "supported_formats": self.supported_formats,
            "required_args": self.required_args,
            "entity": self.entity,
            "entity_type": self.entity_type,
            "format": self.format,
            "hierarchy_path": f"{self.entity}/{self.entity_type}/{self.format}",
            "example_input": self.example_input,
            "field_mappings": self.field_mappings,
            "parser_version": self.parser_version,
        }

    @staticmethod
    def compute_file_hash(file_path: Path) -> str:
        """Compute SHA-256 hash of file contents."""
        import hashlib

        sha256 = hashlib.sha256()
        with open(file_path, "rb") as f:
            for chunk in iter(lambda: f.read(8192), b""):
                sha256.update(chunk)
        return sha256.hexdigest()
