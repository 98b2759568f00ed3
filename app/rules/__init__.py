"""Deterministic intake rules.

This module provides a YAML-based ruleset of vocabulary tables, assistant
turn classification rules and symptom risk rules. All decisions are
deterministic and explainable - no AI/ML is used.
"""

from app.rules.classifier import TurnClassifier
from app.rules.engine import RiskAnalyzer, RuleMatch, evaluate_rule_group
from app.rules.loader import RulesetLoader, compute_ruleset_hash, load_ruleset
from app.rules.models import IntakeRuleset, Rule, RuleGroup, Vocabulary

__all__ = [
    "RulesetLoader",
    "load_ruleset",
    "compute_ruleset_hash",
    "IntakeRuleset",
    "Rule",
    "RuleGroup",
    "Vocabulary",
    "RuleMatch",
    "evaluate_rule_group",
    "RiskAnalyzer",
    "TurnClassifier",
]
