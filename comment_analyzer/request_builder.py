from __future__ import annotations

import json
from typing import Any, Iterable

from comment_analyzer.attribute_types import AttributeType

LANGUAGES = ("en",)


def build_request_body(
        text: str,
        requested_types: Iterable[AttributeType],
        do_not_store: bool,
) -> dict[str, Any]:
    """
    Build the analyze request document.

    Rules:
    - comment.text: the input text, verbatim
    - languages: always ["en"]
    - requestedAttributes: one empty object per requested type (service defaults)
    - doNotStore: forwarded as-is
    """
    return {
        "comment": {"text": text},
        "languages": list(LANGUAGES),
        "requestedAttributes": {t.wire_token: {} for t in _ordered(requested_types)},
        "doNotStore": bool(do_not_store),
    }


def serialize_request(body: dict[str, Any]) -> str:
    # ASCII output: lone surrogates become \udcXX escapes and the body always encodes
    return json.dumps(body)


def _ordered(types: Iterable[AttributeType]) -> list[AttributeType]:
    # Enum declaration order, duplicates removed
    order = list(AttributeType)
    return sorted(set(types), key=order.index)
