from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional

from comment_analyzer.attribute_types import AttributeType, NumberKind

DEFAULT_USER_AGENT = "comment-analyzer-client/0.1.0"


@dataclass(frozen=True)
class ScoreValue:
    """A probability in [0, 1] tagged with its number kind."""

    value: float
    kind: NumberKind = NumberKind.PROBABILITY


@dataclass(frozen=True)
class AttributeScore:
    """Summary score of one attribute, unwrapped from the `summaryScore` field."""

    attribute: AttributeType
    summary: ScoreValue


@dataclass(frozen=True)
class AnalysisResult:
    """
    Scores returned for one analyzed text.

    Keys are the attribute types the service answered for (normally exactly
    the requested set).
    """

    scores: Mapping[AttributeType, AttributeScore]

    def probability(self, attribute: AttributeType) -> float:
        """
        Raises:
            KeyError: if the attribute was not scored
        """
        return self.scores[attribute].summary.value

    def to_dict(self) -> dict[str, float]:
        return {attr.wire_token: score.summary.value for attr, score in self.scores.items()}

    def __contains__(self, attribute: object) -> bool:
        return attribute in self.scores

    def __iter__(self) -> Iterator[AttributeType]:
        return iter(self.scores)

    def __len__(self) -> int:
        return len(self.scores)


@dataclass(frozen=True)
class ClientConfig:
    api_key: str = field(repr=False)
    do_not_store: bool
    timeout_sec: Optional[float] = None
    user_agent: str = DEFAULT_USER_AGENT
