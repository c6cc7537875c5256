#!/usr/bin/env python3
"""Seed a demo response store with sample survey submissions.

Usage:
    python scripts/seed_demo.py

This script:
1. Initializes the demo database
2. Submits one answer set per demo group through the ingestion flow
3. Prints the resulting dominant snapshot
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from tally.db.session import init_db, session_scope  # noqa: E402
from tally.ingest.submissions import SubmissionInput, submit_responses  # noqa: E402

# Constants
DEMO_DB_PATH = PROJECT_ROOT / "demo.db"
DEMO_GROUPS = ["grupo-a", "grupo-b", "grupo-c", "grupo-d", "grupo-e"]
DEMO_SEED = 42


def build_demo_inputs(seed: int = DEMO_SEED) -> list[SubmissionInput]:
    """Build reproducible answer sets, one per demo group."""
    rng = random.Random(seed)

    def answers(count: int) -> list[int]:
        return [rng.randint(1, 10) for _ in range(count)]

    return [
        SubmissionInput(group=group, topic1=answers(7), topic2=answers(7), topic3=answers(8))
        for group in DEMO_GROUPS
    ]


def main() -> int:
    """Seed the demo database."""
    if DEMO_DB_PATH.exists():
        print(f"Demo database already exists: {DEMO_DB_PATH}")
        print("Delete it to reseed.")
        return 0

    init_db(DEMO_DB_PATH)
    result = None
    with session_scope(DEMO_DB_PATH) as session:
        for submission_input in build_demo_inputs():
            result = submit_responses(session, submission_input)
            print(f"Stored submission {result.submission_id} for {submission_input.group}")

    if result is not None:
        print("Dominant snapshot:")
        for index, values in enumerate(result.dominant_snapshot, start=1):
            print(f"    tema{index}: {values}")

    print("Demo seeded successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
