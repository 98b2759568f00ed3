"""Deterministic rules evaluation and symptom risk analysis.

Rules are evaluated in priority order against a small facts dict. All
decisions are:
- Deterministic (same input = same output)
- Explainable (records the rule that fired)
- Auditable (records ruleset version and hash)

NO AI/ML is used for risk assignment.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from app.core.exceptions import EmptyInputError, RulesetError
from app.models.assessment import RiskAssessment, RiskLevel
from app.rules.models import IntakeRuleset, RuleGroup


@dataclass
class RuleMatch:
    """Outcome of evaluating a rule group: the rule that fired, if any."""

    rule_id: str | None
    outcome: dict[str, Any]

    @property
    def matched(self) -> bool:
        return self.rule_id is not None


def evaluate_rule_group(group: RuleGroup, facts: dict[str, Any]) -> RuleMatch:
    """Return the first matching rule's outcome, or the group default.

    Args:
        group: Priority-sorted rule group
        facts: Facts dict, e.g. {"text": "..."}

    Returns:
        RuleMatch with the fired rule id (None for the default) and outcome
    """
    for rule in group.rules:
        if _evaluate_rule_conditions(rule.when, facts):
            return RuleMatch(rule_id=rule.id, outcome=rule.then)

    return RuleMatch(rule_id=None, outcome=group.default)


def _evaluate_rule_conditions(when: dict[str, Any], facts: dict[str, Any]) -> bool:
    """Evaluate rule conditions against facts.

    Args:
        when: Condition block from rule
        facts: Nested facts dict

    Returns:
        True if conditions are satisfied
    """
    if not when:
        return False

    if "all" in when:
        return _evaluate_all(when["all"], facts)

    if "any" in when:
        return _evaluate_any(when["any"], facts)

    return False


def _evaluate_all(conditions: list[dict[str, Any]], facts: dict[str, Any]) -> bool:
    """Evaluate AND conditions."""
    for cond in conditions:
        if "any" in cond:
            if not _evaluate_any(cond["any"], facts):
                return False
        elif "all" in cond:
            if not _evaluate_all(cond["all"], facts):
                return False
        elif not _evaluate_single(cond, facts):
            return False
    return True


def _evaluate_any(conditions: list[dict[str, Any]], facts: dict[str, Any]) -> bool:
    """Evaluate OR conditions."""
    for cond in conditions:
        if "all" in cond:
            if _evaluate_all(cond["all"], facts):
                return True
        elif "any" in cond:
            if _evaluate_any(cond["any"], facts):
                return True
        elif _evaluate_single(cond, facts):
            return True
    return False


def _evaluate_single(cond: dict[str, Any], facts: dict[str, Any]) -> bool:
    """Evaluate a single condition.

    Supports operator: contains (substring containment, no word boundaries)
    """
    actual = facts.get(cond.get("fact"))
    if not actual:
        return False

    return str(cond.get("value")) in actual


def _risk_level_from_string(value: Any, source: str) -> RiskLevel:
    try:
        return RiskLevel(str(value).lower())
    except ValueError as e:
        raise RulesetError(f"{source}: unknown risk_level {value!r}") from e


class RiskAnalyzer:
    """Maps a symptom collection to a risk tier and recommended actions.

    Evaluates the ruleset's risk rules as a priority chain over the joined,
    lower-cased symptom text. Branch-specific recommendations come first;
    the ruleset's universal follow-ups are always appended after them.
    """

    def __init__(self, ruleset: IntakeRuleset) -> None:
        self.ruleset = ruleset
        self.rules = ruleset.risk_analysis

        # Validate every outcome up front so evaluation cannot hit a bad tier
        for rule in self.rules.rules:
            _risk_level_from_string(rule.then.get("risk_level"), rule.id)
        _risk_level_from_string(self.rules.default.get("risk_level", "low"), "default")

    @staticmethod
    def build_symptom_text(symptoms: Iterable[str] | None) -> str:
        """Join symptoms into the lower-cased aggregate text rules match on.

        Raises:
            EmptyInputError: If there are no non-blank symptoms
        """
        if symptoms is None:
            raise EmptyInputError("Symptoms are required for risk analysis")
        if isinstance(symptoms, str):
            symptoms = [symptoms]

        entries = [s.strip() for s in symptoms if s and s.strip()]
        if not entries:
            raise EmptyInputError("Symptoms are required for risk analysis")

        return " ".join(entries).lower()

    def assess(self, symptoms: Iterable[str] | None) -> RiskAssessment:
        """Assess a symptom collection.

        Args:
            symptoms: Symptom keywords, labels or free-text context

        Returns:
            RiskAssessment with tier, red flags, actions and follow-ups

        Raises:
            EmptyInputError: If the collection is empty or absent
        """
        text = self.build_symptom_text(symptoms)
        match = evaluate_rule_group(self.rules, {"text": text})
        outcome = match.outcome

        follow_up = list(outcome.get("follow_up", []))
        follow_up.extend(self.ruleset.universal_follow_up)

        return RiskAssessment(
            risk_level=_risk_level_from_string(
                outcome.get("risk_level", "low"), match.rule_id or "default"
            ),
            red_flags=list(outcome.get("red_flags", [])),
            suggested_actions=list(outcome.get("suggested_actions", [])),
            follow_up_recommendations=follow_up,
            rules_fired=[match.rule_id] if match.matched else [],
            ruleset_version=self.ruleset.version,
            ruleset_hash=self.ruleset.content_hash,
        )
