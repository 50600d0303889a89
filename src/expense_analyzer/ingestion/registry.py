"""Registry for ingestion parsers."""
from typing import Dict, Type, List, Any
from expense_analyzer.ingestion.base import BaseParser

class ParserRegistry:
    _parsers: Dict[str, Type[BaseParser]] = {}

    @classmethod
    def register(cls, name: str):
        """Decorator to register a parser."""
        def decorator(parser_cls: Type[BaseParser]):
            cls._parsers[name] = parser_cls
            return parser_cls
        return decorator

    @classmethod
    def get(cls, name: str) -> Type[BaseParser]:
        """Get a parser class by name."""
        return cls._parsers[name]

    @classmethod
    def list_parsers(cls) -> List[Dict[str, Any]]:
        """List all available parsers with basic metadata."""
        return [
            {
                "name": name,
                "description": parser.description,
                "supported_formats": getattr(parser, "supported_formats", []),
                "required_args": getattr(parser, "required_args", []),
            }
            for name, parser in cls._parsers.items()
        ]

    @classmethod
    def get_parser_metadata(cls, name: str) -> Dict[str, Any]:
        """Get full metadata for a specific parser.

        Raises:
            KeyError: If parser not found
        """
        parser = cls.get(name)
        return {
            "name": name,
            **parser.get_metadata(parser),  # Call as unbound method
        }
