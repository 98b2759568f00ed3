#!/usr/bin/env python
"""Intake engine walkthrough scenarios.

Replays scripted conversations through the engine and prints the
structured output for each turn plus the final assessment.

Usage:
    python scripts/intake_demo.py chest_pain   # High risk conversation
    python scripts/intake_demo.py fever_pain   # Medium risk with catalog picks
    python scripts/intake_demo.py mild_cold    # Low risk, medications and allergy
    python scripts/intake_demo.py all          # Run all scenarios
"""

import argparse
import json
from typing import Any

from app.core.logging import setup_logging
from app.fixtures.symptom_catalog import get_catalog_symptom
from app.models.conversation import Role, Utterance
from app.services.intake import create_intake_engine

# Catalog picks are submitted before the turns.
SCENARIOS: dict[str, dict[str, Any]] = {
    "chest_pain": {
        "catalog": [],
        "turns": [
            Utterance("I've had chest pain since this morning", Role.USER),
            Utterance("How long does each episode last?", Role.ASSISTANT),
            Utterance("A few minutes. I'm taking Aspirin already.", Role.USER),
            Utterance(
                "Please call 911 or go to the emergency department immediately.",
                Role.ASSISTANT,
            ),
        ],
    },
    "fever_pain": {
        "catalog": ["fever", "joint-pain"],
        "turns": [
            Utterance("My fever started two days ago and my knees hurt", Role.USER),
            Utterance("Can you describe the pain?", Role.ASSISTANT),
            Utterance("The pain is worse at night and I feel tired", Role.USER),
            Utterance("I recommend seeing your doctor within two days.", Role.ASSISTANT),
        ],
    },
    "mild_cold": {
        "catalog": ["runny-nose"],
        "turns": [
            Utterance("Just a runny nose and some congestion", Role.USER),
            Utterance("Thanks, that helps.", Role.ASSISTANT),
            Utterance("My GP prescribed Cetirizine. I'm allergic to penicillin.", Role.USER),
        ],
    },
}


def run_scenario(name: str) -> dict[str, Any]:
    """Run one scenario on a fresh engine and return its transcript."""
    engine = create_intake_engine()
    scenario = SCENARIOS[name]
    session_id = f"demo-{name}"
    transcript: list[dict[str, Any]] = []

    if scenario["catalog"]:
        engine.submit_selected_symptoms(
            session_id,
            [get_catalog_symptom(symptom_id) for symptom_id in scenario["catalog"]],
        )

    for utterance in scenario["turns"]:
        result = engine.process_turn(session_id, utterance)
        entry = {"role": utterance.role.value, "text": utterance.text}
        if utterance.role is Role.USER:
            entry.update({
                "symptoms": sorted(result.symptoms),
                "medications": result.medications,
                "allergy_mentions": result.allergy_mentions,
            })
        else:
            entry["classification"] = result.value
        transcript.append(entry)

    report = engine.build_report(session_id)

    return {
        "scenario": name,
        "transcript": transcript,
        "report": report.to_dict(),
    }


def main():
    """Main entry point for the demo runner."""
    parser = argparse.ArgumentParser(description="Intake engine walkthrough")
    parser.add_argument(
        "scenario",
        choices=[*SCENARIOS, "all"],
        help="Scenario to run",
    )
    args = parser.parse_args()

    setup_logging()

    names = list(SCENARIOS) if args.scenario == "all" else [args.scenario]
    results = [run_scenario(name) for name in names]

    print(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
