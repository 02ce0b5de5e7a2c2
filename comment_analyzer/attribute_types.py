from __future__ import annotations

from enum import Enum


class AttributeType(Enum):
    """
    Analysis dimensions supported by the comment analyzer service.

    The enum value is the wire token, so the mapping to/from the JSON key is
    total and bijective.
    """

    TOXICITY = "TOXICITY"
    SEVERE_TOXICITY = "SEVERE_TOXICITY"
    IDENTITY_ATTACK = "IDENTITY_ATTACK"
    INSULT = "INSULT"
    PROFANITY = "PROFANITY"
    THREAT = "THREAT"
    SEXUALLY_EXPLICIT = "SEXUALLY_EXPLICIT"
    FLIRTATION = "FLIRTATION"

    # Experimental attributes (v1alpha1)
    SPAM = "SPAM"
    INCOHERENT = "INCOHERENT"
    OBSCENE = "OBSCENE"
    INFLAMMATORY = "INFLAMMATORY"
    ATTACK_ON_AUTHOR = "ATTACK_ON_AUTHOR"
    ATTACK_ON_COMMENTER = "ATTACK_ON_COMMENTER"
    LIKELY_TO_REJECT = "LIKELY_TO_REJECT"
    UNSUBSTANTIAL = "UNSUBSTANTIAL"

    @property
    def wire_token(self) -> str:
        return self.value

    @classmethod
    def from_wire_token(cls, token: str) -> "AttributeType":
        """
        Raises:
            ValueError: if token is not a known attribute
        """
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Unknown attribute type: {token!r}") from None


class NumberKind(Enum):
    """Kind of number carried by a summary score. Only probabilities exist today."""

    PROBABILITY = "PROBABILITY"

    @property
    def wire_token(self) -> str:
        return self.value

    @classmethod
    def from_wire_token(cls, token: str) -> "NumberKind":
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Unknown score type: {token!r}") from None
