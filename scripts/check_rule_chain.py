"""Print the rule chain in evaluation order and optionally apply it to every entry."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError

from rulechain.application.use_cases.rules import apply_rules, list_rules
from rulechain.domain.errors import RuleChainError
from rulechain.infrastructure.database import SessionLocal, initialize_database


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for the chain check."""

    parser = argparse.ArgumentParser(
        description="Verify that the active rules form a single ordered chain.",
    )
    parser.add_argument(
        "--apply",
        action="store_true",
        help="Recategorize every stored entry once the chain checks out.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Check the chain using the provided command line arguments."""

    args = parse_args(argv)
    initialize_database()

    session = SessionLocal()
    try:
        rules = list_rules(session)
        for position, rule in enumerate(rules, start=1):
            print(
                f"{position:>3}. #{rule.id} {rule.property} {rule.operator.value} "
                f"{rule.value!r} -> {rule.category_id}"
            )
        print(f"Chain OK: {len(rules)} active rule(s)")

        if args.apply:
            changes = apply_rules(session)
            for category_id, entry_ids in changes.items():
                print(f"{len(entry_ids)} entries changed to {category_id}")
            if not changes:
                print("No entries changed")
    except RuleChainError as exc:
        raise SystemExit(str(exc)) from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while checking rules: {exc}") from exc
    finally:
        session.close()


if __name__ == "__main__":
    main()
