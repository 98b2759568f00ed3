"""Assistant turn classification.

Classifies an assistant utterance into one of a fixed set of
conversational intents by evaluating the ruleset's precedence-ordered
turn rules. A message containing both "emergency" and "doctor" is an
EMERGENCY because the emergency rule has the higher priority.
"""

from typing import Any

from app.core.exceptions import RulesetError
from app.extraction.normalizer import normalize
from app.models.assessment import TurnClassification
from app.rules.engine import evaluate_rule_group
from app.rules.models import IntakeRuleset


def _classification_from_outcome(outcome: dict[str, Any], source: str) -> TurnClassification:
    """Map a rule outcome onto the closed classification enum."""
    value = outcome.get("classification")
    try:
        return TurnClassification(value)
    except ValueError as e:
        raise RulesetError(f"{source}: unknown classification {value!r}") from e


class TurnClassifier:
    """Total classifier for assistant utterances.

    Every rule outcome is resolved to a TurnClassification when the
    classifier is built, so evaluation never falls through to an
    unintended value.
    """

    def __init__(self, ruleset: IntakeRuleset) -> None:
        self.rules = ruleset.turn_classification
        self._outcomes: dict[str, TurnClassification] = {
            rule.id: _classification_from_outcome(rule.then, rule.id)
            for rule in self.rules.rules
        }
        if self.rules.default:
            self._default = _classification_from_outcome(self.rules.default, "default")
        else:
            self._default = TurnClassification.GENERAL

    def classify(self, text: str) -> TurnClassification:
        """Classify an assistant utterance.

        Raises:
            EmptyInputError: If the text is blank
        """
        normalized = normalize(text)
        match = evaluate_rule_group(self.rules, {"text": normalized})

        if match.rule_id is None:
            return self._default
        return self._outcomes[match.rule_id]
