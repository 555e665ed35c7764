"""Traversal helpers for embedded JSON-LD structured data."""

import json
import logging
from collections.abc import Iterator
from typing import Any

from bs4 import BeautifulSoup

from kinoprogram.config import settings

logger = logging.getLogger(__name__)

JSON_LD_SELECTOR = 'script[type="application/ld+json"]'


def iter_json_nodes(value: Any, max_depth: int | None = None) -> Iterator[dict]:
    """
    Yield every object found anywhere inside a parsed JSON value.

    Walks nested lists and dicts with an explicit stack in document order
    (parents before children). Containers nested deeper than max_depth are
    not descended into.

    Args:
        value: Result of json.loads
        max_depth: Depth guard (defaults to settings.max_json_depth)

    Yields:
        Each dict in the structure, including the root if it is a dict
    """
    if max_depth is None:
        max_depth = settings.max_json_depth

    stack: list[tuple[Any, int]] = [(value, 0)]
    while stack:
        node, depth = stack.pop()
        if depth > max_depth:
            continue

        if isinstance(node, dict):
            yield node
            children = list(node.values())
        elif isinstance(node, list):
            children = node
        else:
            continue

        # Reversed so the first child is popped first
        for child in reversed(children):
            if isinstance(child, (dict, list)):
                stack.append((child, depth + 1))


def load_json_ld_blocks(soup: BeautifulSoup) -> list[Any]:
    """Parse every JSON-LD script in the document, skipping malformed ones."""
    payloads: list[Any] = []
    for script in soup.select(JSON_LD_SELECTOR):
        raw = script.string or script.get_text(strip=True)
        if not raw or not raw.strip():
            continue
        try:
            payloads.append(json.loads(raw))
        except (json.JSONDecodeError, RecursionError) as e:
            logger.debug(f"Skipping malformed JSON-LD block: {e}")
    return payloads


def node_types(node: dict) -> list[str]:
    """Return the @type of a node as a list of strings."""
    raw = node.get("@type")
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, list):
        return [t for t in raw if isinstance(t, str)]
    return []


def first_named(value: Any) -> dict | None:
    """Return value if it is a dict with a name, or the first such dict in a list."""
    if isinstance(value, dict):
        return value if value.get("name") else None
    if isinstance(value, list):
        for item in value:
            if isinstance(item, dict) and item.get("name"):
                return item
    return None
