# -*- coding: utf-8 -*-
"""
I/O helpers for loading the food database.

File format (caret-delimited text):
- line 1        : header row, always ignored
- lines 2..N    : description^calories^weight

These map directly to business_objects.items.FoodItem.

Failure modes:
- DatabaseIOError        : the file cannot be opened/read; nothing is returned.
- MalformedDatabaseError : a data line does not have exactly 3 fields; the whole
                           load is aborted, no partial catalog is returned.
- Rows whose calories/weight do not start with a number, or that do not make a
  valid FoodItem, are skipped and loading continues.
"""

from __future__ import annotations
import logging
import math
import re
from typing import List, Optional

from maxweight.business_objects.errors import (
    DatabaseIOError,
    MalformedDatabaseError,
    StateValidationError,
)
from maxweight.business_objects.items import FoodItem

log = logging.getLogger(__name__)

FIELD_DELIMITER = "^"
EXPECTED_FIELD_COUNT = 3

# Longest leading decimal literal, after optional whitespace. Anything after it is ignored.
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _split_fields(line: str) -> List[str]:
    """
    Split a data line on '^' the way a stream tokenizer counts fields:
    an empty line has no fields, and one trailing delimiter does not
    open an extra empty field.
    """
    if not line:
        return []
    fields = line.split(FIELD_DELIMITER)
    if fields[-1] == "":
        fields.pop()
    return fields


def _parse_number(field: str) -> Optional[float]:
    m = _LEADING_NUMBER.match(field)
    if m is None:
        return None
    value = float(m.group(1))
    # Out-of-range literals (e.g. 1e999) fail the read instead of becoming inf
    if not math.isfinite(value):
        return None
    return value


def load_food_database(path: str) -> List[FoodItem]:
    """
    Load all the valid food items from the database file at `path`.

    Returns
    -------
    list[FoodItem]
        Items in file order.

    Raises
    ------
    DatabaseIOError
        If the file cannot be opened or read.
    MalformedDatabaseError
        If any data line has a field count other than 3.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().split("\n")
    except (OSError, UnicodeDecodeError) as e:
        log.error("Failed to load food database; cannot open file: %s", path)
        raise DatabaseIOError(f"{path}: cannot open file: {e}") from e

    # A final newline terminates the last line, it does not start a new one
    if lines and lines[-1] == "":
        lines.pop()

    items: List[FoodItem] = []
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        # First line is a header row
        if line_number == 1:
            continue

        fields = _split_fields(line)
        if len(fields) != EXPECTED_FIELD_COUNT:
            log.error(
                "Failed to load food database: invalid field count at line %d; want %d but got %d",
                line_number, EXPECTED_FIELD_COUNT, len(fields),
            )
            raise MalformedDatabaseError(path, line_number, len(fields), line)

        description, calories_field, weight_field = fields
        calories = _parse_number(calories_field)
        weight = _parse_number(weight_field)
        if calories is None or weight is None:
            log.debug("%s:%d: skipping row with unparsable number: %r", path, line_number, line)
            skipped += 1
            continue

        try:
            items.append(FoodItem(description=description, calories=calories, weight=weight))
        except StateValidationError as e:
            log.debug("%s:%d: skipping invalid food item: %s", path, line_number, e)
            skipped += 1

    log.info("Loaded %d food items from %s (%d rows skipped)", len(items), path, skipped)
    return items
