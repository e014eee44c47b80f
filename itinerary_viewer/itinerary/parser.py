"""Delimited-text parsing into itinerary records.

The format is deliberately naive: the first line is the header, every
other non-blank line is a row, fields are split on a single delimiter
with no quoting or escaping. A value containing the delimiter therefore
shifts the columns that follow it.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..domain.models import ColumnNames, ItineraryRecord, ItinerarySet

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\n"


def parse_itinerary(
    text: str,
    columns: Optional[ColumnNames] = None,
    delimiter: str = ",",
) -> ItinerarySet:
    """Parse raw itinerary text into an ordered ItinerarySet.

    Rows shorter than the header get empty strings for the missing
    trailing fields; values beyond the header are dropped. Blank lines
    produce no record. Never raises for string input.

    Args:
        text: Raw text, header line first.
        columns: Header names of the known fields.
        delimiter: Field separator.

    Returns:
        The parsed records in source row order.
    """
    columns = columns or ColumnNames()
    lines = text.split(LINE_TERMINATOR)

    if len(lines) == 1 and not lines[0].strip():
        logger.debug("Empty itinerary text")
        return ItinerarySet(columns=columns)

    # A blank header still yields one record per row, keyed by "".

    headers = tuple(name.strip() for name in lines[0].split(delimiter))

    records: List[ItineraryRecord] = []
    for line in lines[1:]:
        if not line.strip():
            continue

        values = line.split(delimiter)
        items = tuple(
            (header, values[index].strip() if index < len(values) else "")
            for index, header in enumerate(headers)
        )
        records.append(ItineraryRecord(items=items, columns=columns))

    logger.debug(
        "Itinerary parsed",
        extra={"headers": len(headers), "records": len(records)},
    )
    return ItinerarySet(records=tuple(records), headers=headers, columns=columns)
