"""
Lookup, filter and serialize steps of the catalog join.

Irregular rows never raise: short rows and rows without an id are skipped,
and missing names or labels are replaced by the sentinels in JoinConfig.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from . import rules
from .models import JoinConfig, JoinStats, ResultRow
from .parse import Record, Table, parse_csv_text

logger = logging.getLogger(__name__)

NameLookup = Dict[str, str]


def _cell(record: Record, index: int) -> str:
    return record[index].strip()


def _name(record: Record, index: int, missing_name: str) -> str:
    # only a truly empty cell gets the sentinel; whitespace trims to ""
    return record[index].strip() if record[index] else missing_name


def build_name_lookup(
    table: Table,
    skip_rows: int,
    id_index: int,
    name_index: int,
    missing_name: str = rules.MISSING_NAME,
) -> NameLookup:
    """
    Map item id -> name for every data row of `table`.

    Rows too short to hold both columns, or with a blank id, are ignored.
    A later row with the same id replaces the earlier one.
    """
    lookup: NameLookup = {}
    width = max(id_index, name_index)

    for record in table[skip_rows:]:
        if len(record) <= width:
            continue
        item_id = _cell(record, id_index)
        if not item_id:
            continue
        lookup[item_id] = _name(record, name_index, missing_name)

    logger.debug("Built name lookup with %d entries", len(lookup))
    return lookup


def join_tables(
    primary: Table,
    lookup: NameLookup,
    config: JoinConfig,
    stats: Optional[JoinStats] = None,
) -> List[ResultRow]:
    """
    Filter the primary table by category and attach the secondary names.

    Output keeps the order of the primary table. When `stats` is given,
    lookup misses and unmapped categories are counted on it.
    """
    results: List[ResultRow] = []
    width = max(config.id_index, config.name_index, config.type_index)

    for record in primary[config.skip_rows:]:
        if len(record) <= width:
            continue

        item_type = _cell(record, config.type_index)
        if not item_type or item_type not in config.allowed_types:
            continue

        item_id = _cell(record, config.id_index)
        if not item_id:
            continue

        cn_name = _name(record, config.name_index, config.missing_name)

        en_name = lookup.get(item_id)
        if not en_name:
            en_name = config.missing_name
            if stats is not None:
                stats.lookup_misses += 1

        label = config.type_labels.get(item_type)
        if not label:
            label = config.unknown_type
            if stats is not None:
                stats.unknown_types += 1

        results.append(ResultRow(id=item_id, cn_name=cn_name, en_name=en_name, item_type=label))

    if stats is not None:
        stats.rows = len(results)
    logger.debug("Join kept %d of %d primary records", len(results), len(primary))
    return results


def format_csv_cell(value: object) -> str:
    """
    Quote a cell when it holds a comma, quote or newline; double inner quotes.

    csv.writer is not used here: it would also quote "\\r" and end every row
    with a line terminator, and the output must not have a trailing newline.
    """
    text = str(value)
    if "," in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def format_csv_row(cells: Iterable[object]) -> str:
    return ",".join(format_csv_cell(c) for c in cells)


def serialize_results(rows: Sequence[ResultRow], header: Sequence[str] = rules.OUTPUT_HEADER) -> str:
    """
    Render the header and result rows as CSV text.

    Lines are joined with "\\n" and there is no trailing newline.
    """
    lines = [format_csv_row(header)]
    lines.extend(format_csv_row((r.id, r.cn_name, r.en_name, r.item_type)) for r in rows)
    return "\n".join(lines)


def join_catalogs(primary_text: str, secondary_text: str, config: Optional[JoinConfig] = None) -> Tuple[str, JoinStats]:
    """
    Parse both exports, join them and return the combined CSV text with stats.
    """
    config = config or JoinConfig()
    stats = JoinStats()

    secondary = parse_csv_text(secondary_text)
    stats.secondary_records = len(secondary)
    lookup = build_name_lookup(
        secondary,
        config.skip_rows,
        config.secondary_id_index,
        config.secondary_name_index,
        config.missing_name,
    )
    stats.lookup_entries = len(lookup)

    primary = parse_csv_text(primary_text)
    stats.primary_records = len(primary)
    rows = join_tables(primary, lookup, config, stats)

    return serialize_results(rows, config.header), stats
