"""Rewrite OFX SGML tag soup into well-formed XML text.

OFX 1.x leaves value tags unclosed and relies on the line break as the
terminator::

    <STMTTRN>
    <TRNTYPE>DEBIT
    <TRNAMT>-100.00
    </STMTTRN>

Every physical line holds either a single tag or a tag followed by its
value, so closing tags can be added line by line. Values containing ``<``
or ``>`` or spanning several lines are not supported.
"""

from __future__ import annotations

import logging
import re

from expense_analyzer.ingestion.ofx.errors import TranscodeError

logger = logging.getLogger(__name__)

# Only CR, LF and CRLF end a physical line; str.splitlines() also breaks on
# form feeds, U+0085 and U+2028, which can occur inside values.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Characters XML 1.0 cannot carry, not even as character references.
_XML_ILLEGAL = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def close_value_tag(line: str) -> str:
    """Append the matching closing tag to a ``<TAG>value`` line."""
    end = line.find(">")
    tag = line[1:end] if end > 0 else ""
    if not tag.strip():
        raise TranscodeError(line=line)
    return f"{line}</{tag}>"


def sgml_to_xml(body: str) -> str:
    """Convert an OFX SGML body (starting at ``<OFX>``) to XML text.

    Raises:
        TranscodeError: if a line does not start with ``<``, or a value
            line has no usable tag name.
    """
    xml_lines: list[str] = []
    for line_number, raw_line in enumerate(_LINE_BREAK.split(body), start=1):
        line = _XML_ILLEGAL.sub(" ", raw_line).strip()
        if not line:
            continue

        if not line.startswith("<"):
            logger.debug("Line %d is not a tag: %r", line_number, line[:40])
            raise TranscodeError(line_number=line_number, line=line)

        if line.endswith(">"):
            xml_lines.append(line)
        else:
            try:
                xml_lines.append(close_value_tag(line))
            except TranscodeError as exc:
                exc.line_number = line_number
                logger.debug("Line %d has no tag name: %r", line_number, line[:40])
                raise

    return "\n".join(xml_lines)
