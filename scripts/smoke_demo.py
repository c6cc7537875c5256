#!/usr/bin/env python3
"""Smoke test for the demo response store.

Validates that the demo database was seeded and that the latest
submission carries a complete dominant snapshot.

Usage:
    python scripts/smoke_demo.py

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from tally.aggregation.dominant import compute_snapshot  # noqa: E402
from tally.aggregation.summary import get_latest_summary  # noqa: E402
from tally.db import repo  # noqa: E402
from tally.db.session import session_scope  # noqa: E402
from tally.errors import NotFoundError  # noqa: E402
from tally.models.domain import TOPICS  # noqa: E402

# Constants
DEMO_DB_PATH = PROJECT_ROOT / "demo.db"


def check_database_exists() -> bool:
    """Check that demo database exists."""
    if not DEMO_DB_PATH.exists():
        print(f"FAIL: Demo database not found: {DEMO_DB_PATH}")
        return False
    print(f"OK: Database exists: {DEMO_DB_PATH}")
    return True


def check_submissions_exist(session) -> bool:
    """Check that at least one submission was stored."""
    count = repo.count_submissions(session)
    if count == 0:
        print("FAIL: No submissions stored")
        return False
    print(f"OK: {count} submissions stored")
    return True


def check_summary_shape(session) -> bool:
    """Check that the latest summary has one value per question."""
    try:
        snapshot = get_latest_summary(session)
    except NotFoundError:
        print("FAIL: No summary available")
        return False

    expected = [count for _, count in TOPICS]
    actual = [len(values) for values in snapshot]
    if actual != expected:
        print(f"FAIL: Summary lengths {actual}, expected {expected}")
        return False

    print(f"OK: Summary lengths {actual}")
    return True


def check_summary_matches_history(session) -> bool:
    """Check that the latest summary equals a fresh recomputation."""
    stored = get_latest_summary(session)
    recomputed = compute_snapshot(repo.get_all_submissions(session))
    if stored != recomputed:
        print("FAIL: Stored summary differs from recomputed summary")
        print(f"    stored:     {stored}")
        print(f"    recomputed: {recomputed}")
        return False

    print("OK: Stored summary matches full recomputation")
    return True


def main() -> int:
    """Run all smoke checks."""
    if not check_database_exists():
        return 1

    with session_scope(DEMO_DB_PATH) as session:
        results = [
            check_submissions_exist(session),
            check_summary_shape(session),
        ]
        if all(results):
            results.append(check_summary_matches_history(session))

    if all(results):
        print("\nAll checks passed!")
        return 0

    print("\nSome checks failed.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
