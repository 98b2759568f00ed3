"""Typed views over a loaded intake ruleset.

The YAML file is the source of truth. These dataclasses validate its
structure once at load time so that evaluation code can rely on it.
"""

import re
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from app.core.exceptions import RulesetError


def _string_list(data: dict[str, Any], key: str, section: str) -> tuple[str, ...]:
    """Read a list of strings, lower-casing entries for matching."""
    values = data.get(key)
    if not isinstance(values, list) or not values:
        raise RulesetError(f"{section}.{key} must be a non-empty list")
    return tuple(str(v).lower() for v in values)


@dataclass(frozen=True)
class Vocabulary:
    """Keyword tables used by the extractors."""

    symptoms: tuple[str, ...]
    medication_triggers: tuple[str, ...]
    medication_pattern_words: tuple[str, ...]
    allergy_triggers: tuple[str, ...]

    @cached_property
    def medication_pattern(self) -> re.Pattern[str]:
        """Pattern capturing a pattern word followed by a letters/hyphens token."""
        words = "|".join(re.escape(w) for w in self.medication_pattern_words)
        return re.compile(rf"\b(?:{words})\s+([a-zA-Z-]+)", re.IGNORECASE)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vocabulary":
        if not isinstance(data, dict):
            raise RulesetError("vocabulary section is missing")
        return cls(
            symptoms=_string_list(data, "symptoms", "vocabulary"),
            medication_triggers=_string_list(data, "medication_triggers", "vocabulary"),
            medication_pattern_words=_string_list(
                data, "medication_pattern_words", "vocabulary"
            ),
            allergy_triggers=_string_list(data, "allergy_triggers", "vocabulary"),
        )


SUPPORTED_OPS = frozenset({"contains"})


def _check_conditions(conditions: Any, rule_id: str) -> None:
    """Reject condition blocks the evaluator cannot run."""
    if isinstance(conditions, list):
        for cond in conditions:
            _check_conditions(cond, rule_id)
        return
    if not isinstance(conditions, dict):
        raise RulesetError(f"{rule_id}: malformed condition {conditions!r}")
    if "all" in conditions or "any" in conditions:
        _check_conditions(conditions.get("all", conditions.get("any")), rule_id)
        return
    if not conditions.get("fact"):
        raise RulesetError(f"{rule_id}: condition requires a fact")
    op = conditions.get("op", "contains")
    if op not in SUPPORTED_OPS:
        raise RulesetError(f"{rule_id}: unsupported operator {op!r}")


@dataclass(frozen=True)
class Rule:
    """A prioritised rule: conditions under ``when``, outcome under ``then``."""

    id: str
    priority: int  # Lower = higher priority
    when: dict[str, Any]
    then: dict[str, Any]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rule":
        if "id" not in data or "when" not in data or "then" not in data:
            raise RulesetError(f"Rule requires id, when and then: {data!r}")
        _check_conditions(data["when"], data["id"])
        return cls(
            id=data["id"],
            priority=data.get("priority", 999),
            when=data["when"],
            then=data["then"],
        )


@dataclass(frozen=True)
class RuleGroup:
    """An ordered group of rules sharing an evaluation mode and default."""

    mode: str
    default: dict[str, Any]
    rules: tuple[Rule, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any], section: str) -> "RuleGroup":
        if not isinstance(data, dict):
            raise RulesetError(f"{section} section is missing")
        evaluation = data.get("evaluation", {})
        mode = evaluation.get("mode", "first_match_wins")
        if mode != "first_match_wins":
            raise RulesetError(f"{section}: unsupported evaluation mode {mode!r}")
        rules = [Rule.from_dict(r) for r in data.get("rules", [])]
        return cls(
            mode=mode,
            default=evaluation.get("default", {}),
            # Sort rules by priority (lower = higher priority)
            rules=tuple(sorted(rules, key=lambda r: r.priority)),
        )


@dataclass(frozen=True)
class IntakeRuleset:
    """A versioned set of vocabulary tables and rules."""

    id: str
    name: str
    version: str
    content_hash: str
    vocabulary: Vocabulary
    turn_classification: RuleGroup
    risk_analysis: RuleGroup
    universal_follow_up: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any], content_hash: str = "") -> "IntakeRuleset":
        """Create an IntakeRuleset from a parsed YAML document.

        Raises:
            RulesetError: If a required section is missing or malformed
        """
        if not isinstance(data, dict):
            raise RulesetError("Ruleset document must be a mapping")

        risk_data = data.get("risk_analysis")
        risk_analysis = RuleGroup.from_dict(risk_data, "risk_analysis")

        return cls(
            id=data.get("id", "unknown"),
            name=data.get("name", ""),
            version=str(data.get("version", "unknown")),
            content_hash=content_hash,
            vocabulary=Vocabulary.from_dict(data.get("vocabulary")),
            turn_classification=RuleGroup.from_dict(
                data.get("turn_classification"), "turn_classification"
            ),
            risk_analysis=risk_analysis,
            universal_follow_up=tuple(risk_data.get("universal_follow_up", [])),
        )
