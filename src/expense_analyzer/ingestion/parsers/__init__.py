"""
Parser auto-discovery module.

Imports every parser module in this directory so that parsers self-register
via the @ParserRegistry.register decorator.
"""

import importlib
from pathlib import Path

_parsers_dir = Path(__file__).parent

_parser_modules = []

for file_path in _parsers_dir.glob("*.py"):
    if file_path.stem in ("__init__", "base") or file_path.stem.startswith("_"):
        continue

    module_name = f"expense_analyzer.ingestion.parsers.{file_path.stem}"

    try:
        module = importlib.import_module(module_name)
        _parser_modules.append(module)
    except Exception as e:
        import warnings
        warnings.warn(f"Failed to import parser module {module_name}: {e}")

from .ofx import OfxFileParser

__all__ = [
    "OfxFileParser",
]
