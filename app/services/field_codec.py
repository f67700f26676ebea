"""Codec for list-valued listing attributes stored as JSON array text."""

import json
import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)

EMPTY_LIST_TOKEN = "[]"


def encode_list(values: Iterable[str]) -> str:
    """
    Encode a sequence of strings for storage.

    Order and content are preserved exactly; an empty sequence encodes to
    ``"[]"`` rather than an empty or null value.
    """
    items = list(values)
    if not items:
        return EMPTY_LIST_TOKEN
    return json.dumps(items, ensure_ascii=False)


def decode_list(raw: str | None) -> list[str]:
    """
    Decode a stored list field.

    Rows written before validation was enforced may hold NULL, an empty string
    or text that is not a JSON array of strings. All of those read as ``[]``.
    """
    if not raw:
        return []

    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.debug("Unparseable list field %r, treating as empty", raw[:80])
        return []

    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        logger.debug("List field is not an array of strings, treating as empty")
        return []

    return value
