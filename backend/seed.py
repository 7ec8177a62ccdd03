# backend/seed.py
import argparse
from pathlib import Path

import pandas as pd

from app import create_app
from core.settings import BASE_DIR, load_settings
from models import Game, Review, User, db

# Insert order matters: reviews reference games and users
SEED_TABLES = [
    ("games", Game),
    ("users", User),
    ("reviews", Review),
]


def read_rows(csv_path: Path) -> list:
    """Load a seed CSV as a list of dicts, with empty cells as None."""
    df = pd.read_csv(csv_path)
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


def seed_database(seed_dir, reset=False) -> dict:
    """
    Fill the tables from <seed_dir>/{games,users,reviews}.csv.
    Must run inside an app context. Returns {table: rows_inserted}.
    """
    seed_dir = Path(seed_dir)

    if reset:
        print("=== STAGE 1: Resetting tables ===")
        # drop identities left over from rows about to be deleted
        db.session.remove()
        db.drop_all()
        db.create_all()

    counts = {}
    print("=== STAGE 2: Loading seed CSVs ===")
    for name, model in SEED_TABLES:
        csv_path = seed_dir / f"{name}.csv"
        if not csv_path.exists():
            raise FileNotFoundError(f"Missing seed file: {csv_path}")

        rows = read_rows(csv_path)
        db.session.add_all(model(**row) for row in rows)
        # flush so the next table's foreign keys can resolve
        db.session.flush()

        counts[name] = len(rows)
        print(f"[+] {name}: {len(rows)} rows")

    db.session.commit()
    print("=== Seeding done ===")
    return counts


def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed the game reviews database from CSV files.")
    parser.add_argument("--seed-dir", help="directory holding games.csv, users.csv, reviews.csv")
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables first")
    args = parser.parse_args(argv)

    settings = load_settings()
    seed_dir = Path(args.seed_dir or settings["seed_dir"])
    if not seed_dir.is_absolute():
        seed_dir = BASE_DIR / seed_dir

    app = create_app()
    with app.app_context():
        app.logger.info("[SEED] seeding from %s", seed_dir)
        seed_database(seed_dir, reset=args.reset)


if __name__ == "__main__":
    main()
