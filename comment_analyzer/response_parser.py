from __future__ import annotations

import json
import logging
from typing import Any

from comment_analyzer.attribute_types import AttributeType, NumberKind
from comment_analyzer.errors import ParsingFailed
from comment_analyzer.models import AnalysisResult, AttributeScore, ScoreValue

logger = logging.getLogger(__name__)


def parse_response(body: str) -> AnalysisResult:
    """
    Parse an analyze response body into an AnalysisResult.

    Expected shape:
      {"attributeScores": {"<TOKEN>": {"summaryScore": {"value": <0..1>, "type": "PROBABILITY"}}}}

    Other top-level fields (languages, detectedLanguages, ...) and per-attribute
    fields (spanScores, ...) are ignored.

    Raises:
        ParsingFailed: on malformed JSON or any schema mismatch
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError, RecursionError) as e:
        raise ParsingFailed(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParsingFailed(f"Expected a JSON object, got {type(data).__name__}")
    if "attributeScores" not in data:
        raise ParsingFailed("Missing field: attributeScores")

    raw_scores = data["attributeScores"]
    if not isinstance(raw_scores, dict):
        raise ParsingFailed("Field attributeScores is not an object")

    scores: dict[AttributeType, AttributeScore] = {}
    for token, entry in raw_scores.items():
        try:
            attribute = AttributeType.from_wire_token(token)
        except ValueError as e:
            raise ParsingFailed(str(e)) from e
        scores[attribute] = AttributeScore(attribute=attribute, summary=_parse_summary(token, entry))

    logger.debug("Parsed scores: attributes=%s", [a.wire_token for a in scores])
    return AnalysisResult(scores=scores)


def _parse_summary(token: str, entry: Any) -> ScoreValue:
    if not isinstance(entry, dict) or "summaryScore" not in entry:
        raise ParsingFailed(f"Missing field: attributeScores.{token}.summaryScore")

    summary = entry["summaryScore"]
    if not isinstance(summary, dict):
        raise ParsingFailed(f"Field attributeScores.{token}.summaryScore is not an object")

    value = summary.get("value")
    # bool is an int subclass; a JSON true/false is not a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParsingFailed(
            f"Field attributeScores.{token}.summaryScore.value must be a number, got {value!r}"
        )
    if not 0.0 <= value <= 1.0:
        raise ParsingFailed(
            f"Field attributeScores.{token}.summaryScore.value out of range [0, 1]: {value}"
        )

    kind_token = summary.get("type")
    if not isinstance(kind_token, str):
        raise ParsingFailed(f"Field attributeScores.{token}.summaryScore.type must be a string")
    try:
        kind = NumberKind.from_wire_token(kind_token)
    except ValueError as e:
        raise ParsingFailed(str(e)) from e

    return ScoreValue(value=float(value), kind=kind)
