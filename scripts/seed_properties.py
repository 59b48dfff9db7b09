"""Utility script to load the property fixture into the database."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from realty.application.use_cases.properties import seed_properties
from realty.config import get_settings
from realty.domain.errors import NotFoundError, ValidationError
from realty.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for property seeding."""

    parser = argparse.ArgumentParser(
        description="Load real-estate listings from a JSON fixture.",
    )
    parser.add_argument(
        "--fixture",
        default=None,
        help="Path to the JSON fixture (default: SEED_DATA_PATH setting)",
    )
    return parser.parse_args()


def main() -> None:
    """Seed properties using the provided command line arguments."""

    args = parse_args()
    fixture = args.fixture or get_settings().seed_data_path

    initialize_database()

    session = SessionLocal()
    try:
        inserted = seed_properties(session, fixture)
    except (NotFoundError, ValidationError) as exc:
        raise SystemExit(f"Could not seed properties: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while seeding properties: {exc}") from exc
    else:
        print(f"Seeded {inserted} properties from {fixture}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
