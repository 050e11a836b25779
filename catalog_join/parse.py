"""
Text decoding and CSV tokenizing for the catalog exports.

The tokenizer is a single character scan rather than a line split, so quoted
fields may carry commas, newlines and doubled quotes.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)

Record = List[str]
Table = List[Record]


class CatalogReadError(ValueError):
    """Raised when export bytes cannot be turned into text."""


def decode_text(raw: bytes) -> Tuple[str, str]:
    """
    Decode export bytes to text.

    Rules:
    - UTF-8 first, with a leading BOM stripped.
    - Otherwise use charset-normalizer's best guess.
    - If neither works, raise CatalogReadError.

    Returns the text and the encoding actually used.
    """
    try:
        return raw.decode("utf-8-sig"), "utf-8"
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is None:
        raise CatalogReadError("Could not detect a text encoding for the input")

    logger.debug("Input is not UTF-8, decoding as %s", match.encoding)
    try:
        return raw.decode(match.encoding), match.encoding
    except (UnicodeDecodeError, LookupError) as e:
        raise CatalogReadError(f"Could not decode input as {match.encoding}: {e}") from e


def parse_csv_text(csv_text: str) -> Table:
    """
    Parse CSV text into records of field strings.

    Quoting follows RFC 4180 with one lenient exception: a quote that appears
    after a field has started is kept as a literal character instead of being
    rejected. Real exports contain such fields and rely on it.

    Rows are not padded; callers must check the length of each record before
    indexing into it.
    """
    records: Table = []
    record: Record = []
    field: List[str] = []
    in_quotes = False

    text = csv_text.replace("\r\n", "\n").replace("\r", "\n")
    length = len(text)
    i = 0

    while i < length:
        char = text[i]

        if in_quotes:
            if char == '"':
                if i + 1 < length and text[i + 1] == '"':
                    field.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                field.append(char)
        elif char == '"':
            if field:
                field.append(char)
            else:
                in_quotes = True
        elif char == ",":
            record.append("".join(field))
            field = []
        elif char == "\n":
            record.append("".join(field))
            records.append(record)
            record = []
            field = []
        else:
            field.append(char)
        i += 1

    if field or record:
        record.append("".join(field))
        records.append(record)

    # trailing blank line
    if records and records[-1] == [""]:
        records.pop()

    logger.debug("Parsed %d records", len(records))
    return records
