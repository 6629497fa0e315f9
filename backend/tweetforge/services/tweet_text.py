"""Turn the inference service's loosely-shaped response into tweet text.

The upstream response schema is not fixed. Extraction rules are tried in
order against the decoded JSON body; the first one producing a non-empty
string wins. When none match, the whole body is serialized.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Optional, Tuple

ExtractionRule = Callable[[Any], Optional[str]]

TEXT_FIELDS = ("response", "message", "text", "content", "result")


def field_rule(name: str) -> ExtractionRule:
    def extract(body: Any) -> Optional[str]:
        if isinstance(body, dict):
            value = body.get(name)
            if isinstance(value, str) and value:
                return value
        return None

    extract.__name__ = f"field_{name}"
    return extract


def bare_string(body: Any) -> Optional[str]:
    if isinstance(body, str) and body:
        return body
    return None


EXTRACTION_RULES: Tuple[ExtractionRule, ...] = tuple(field_rule(name) for name in TEXT_FIELDS) + (bare_string,)


def extract_text(body: Any, rules: Tuple[ExtractionRule, ...] = EXTRACTION_RULES) -> str:
    for rule in rules:
        text = rule(body)
        if text is not None:
            return text
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def clean_text(text: str) -> str:
    """Trim whitespace, then drop one layer of surrounding double quotes."""
    text = text.strip()
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        text = text[1:-1]
    return text


def normalize_response(body: Any) -> str:
    return clean_text(extract_text(body))
