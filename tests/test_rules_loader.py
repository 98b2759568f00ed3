"""Tests for ruleset loader and integrity verification."""

from pathlib import Path

import pytest

from app.core.exceptions import RulesetError
from app.rules.loader import RulesetLoader, compute_ruleset_hash, load_ruleset
from app.rules.models import IntakeRuleset

RULESET = "clinical-intake-v1.0.0.yaml"


def _minimal_ruleset_dict() -> dict:
    return {
        "id": "test",
        "version": "0.0.1",
        "vocabulary": {
            "symptoms": ["fever"],
            "medication_triggers": ["taking"],
            "medication_pattern_words": ["taking"],
            "allergy_triggers": ["allergic"],
        },
        "turn_classification": {"rules": []},
        "risk_analysis": {"rules": []},
    }


class TestRulesetLoader:
    """Tests for the RulesetLoader class."""

    def test_load_ruleset_returns_dict_and_hash(self) -> None:
        """Test that load_ruleset returns both ruleset dict and hash."""
        ruleset, ruleset_hash = load_ruleset(RULESET)

        assert isinstance(ruleset, dict)
        assert isinstance(ruleset_hash, str)
        assert len(ruleset_hash) == 64  # SHA256 hex is 64 chars

    def test_load_ruleset_has_required_sections(self) -> None:
        """Test that the raw ruleset has its required sections."""
        ruleset, _ = load_ruleset(RULESET)

        assert "id" in ruleset
        assert "version" in ruleset
        assert "vocabulary" in ruleset
        assert "turn_classification" in ruleset
        assert "risk_analysis" in ruleset

    def test_compute_hash_is_deterministic(self) -> None:
        """Test that hash computation is deterministic."""
        assert compute_ruleset_hash("content") == compute_ruleset_hash("content")

    def test_different_content_produces_different_hash(self) -> None:
        """Test that different content produces different hashes."""
        assert compute_ruleset_hash("content version 1") != compute_ruleset_hash(
            "content version 2"
        )

    def test_loader_returns_validated_ruleset(self) -> None:
        """Test that the loader builds a typed ruleset with hash and version."""
        ruleset = RulesetLoader().load(RULESET)

        assert isinstance(ruleset, IntakeRuleset)
        assert ruleset.version == "1.0.0"
        assert len(ruleset.content_hash) == 64
        assert ruleset.vocabulary.symptoms[0] == "pain"
        assert len(ruleset.universal_follow_up) == 3

    def test_rules_sorted_by_priority(self) -> None:
        """Test that rules come back in priority order."""
        ruleset = RulesetLoader().load(RULESET)

        priorities = [r.priority for r in ruleset.turn_classification.rules]
        assert priorities == sorted(priorities)
        assert ruleset.turn_classification.rules[0].id == "TURN_EMERGENCY"

    def test_loader_caches_ruleset(self) -> None:
        """Test that RulesetLoader caches loaded rulesets."""
        loader = RulesetLoader()

        assert loader.load(RULESET) is loader.load(RULESET)

    def test_loader_clear_cache(self) -> None:
        """Test that cache clearing works."""
        loader = RulesetLoader()

        ruleset1 = loader.load(RULESET)
        loader.clear_cache()
        ruleset2 = loader.load(RULESET)

        assert ruleset1 is not ruleset2
        assert ruleset1.content_hash == ruleset2.content_hash

    def test_loader_list_rulesets(self) -> None:
        """Test listing available rulesets."""
        assert RULESET in RulesetLoader().list_rulesets()

    def test_get_ruleset_info(self) -> None:
        """Test ruleset metadata."""
        info = RulesetLoader().get_ruleset_info(RULESET)

        assert info["id"] == "clinical-intake"
        assert info["version"] == "1.0.0"
        assert len(info["hash"]) == 64

    def test_load_nonexistent_ruleset_raises_error(self) -> None:
        """Test that loading non-existent ruleset raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_ruleset("nonexistent-ruleset.yaml")

    def test_custom_directory(self, tmp_path: Path) -> None:
        """Test that vocabulary tables can be swapped without code changes."""
        (tmp_path / "custom.yaml").write_text(
            """
id: custom
version: "2.0.0"
vocabulary:
  symptoms: [Wheeze]
  medication_triggers: [using]
  medication_pattern_words: [using]
  allergy_triggers: [intolerant]
turn_classification:
  rules: []
risk_analysis:
  rules: []
""",
            encoding="utf-8",
        )

        ruleset = RulesetLoader(tmp_path).load("custom.yaml")

        assert ruleset.vocabulary.symptoms == ("wheeze",)
        assert ruleset.version == "2.0.0"


class TestRulesetValidation:
    """Tests for structural validation of ruleset documents."""

    def test_minimal_ruleset_is_valid(self) -> None:
        """Test that a minimal document builds."""
        ruleset = IntakeRuleset.from_dict(_minimal_ruleset_dict())

        assert ruleset.id == "test"
        assert ruleset.universal_follow_up == ()

    def test_missing_vocabulary_raises(self) -> None:
        """Test that a document without vocabulary is rejected."""
        data = _minimal_ruleset_dict()
        del data["vocabulary"]

        with pytest.raises(RulesetError):
            IntakeRuleset.from_dict(data)

    def test_empty_symptom_list_raises(self) -> None:
        """Test that an empty vocabulary table is rejected."""
        data = _minimal_ruleset_dict()
        data["vocabulary"]["symptoms"] = []

        with pytest.raises(RulesetError):
            IntakeRuleset.from_dict(data)

    def test_unsupported_mode_raises(self) -> None:
        """Test that only first_match_wins evaluation is accepted."""
        data = _minimal_ruleset_dict()
        data["risk_analysis"]["evaluation"] = {"mode": "all_matches"}

        with pytest.raises(RulesetError):
            IntakeRuleset.from_dict(data)

    def test_rule_without_then_raises(self) -> None:
        """Test that a rule must declare an outcome."""
        data = _minimal_ruleset_dict()
        data["turn_classification"]["rules"] = [{"id": "BROKEN", "when": {"any": []}}]

        with pytest.raises(RulesetError):
            IntakeRuleset.from_dict(data)
