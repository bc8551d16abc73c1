"""
Migration: Add case_drafts table.

Stores wizard snapshots keyed by (id, kind):
- CASE rows hold a complete case, re-validated on every load
- WIZARD rows hold partial answers as-is

Snapshots carry a version; rows whose version no longer matches the
application's case version are ignored on load, not rewritten here.
"""
from sqlalchemy import create_engine, inspect, text
import os

# Use same DB URL pattern as main app
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./confirmation.db")


def table_exists(engine, table_name: str) -> bool:
    """Check if a table exists in the database."""
    return inspect(engine).has_table(table_name)


def run_migration():
    """Create the case_drafts table."""
    engine = create_engine(DATABASE_URL)

    if table_exists(engine, "case_drafts"):
        print("case_drafts table already exists")
        return

    with engine.connect() as conn:
        conn.execute(text("""
            CREATE TABLE case_drafts (
                id VARCHAR(64) NOT NULL,
                kind VARCHAR(6) NOT NULL,
                version INTEGER NOT NULL DEFAULT 1,
                payload JSON NOT NULL,
                created_at TIMESTAMP,
                updated_at TIMESTAMP,
                PRIMARY KEY (id, kind)
            )
        """))
        print("Created case_drafts table")

        conn.commit()
        print("\ncase_drafts migration completed successfully!")


def rollback_migration():
    """Drop the case_drafts table."""
    engine = create_engine(DATABASE_URL)

    if not table_exists(engine, "case_drafts"):
        print("case_drafts table does not exist")
        return

    with engine.connect() as conn:
        conn.execute(text("DROP TABLE case_drafts"))
        print("Dropped case_drafts table")

        conn.commit()
        print("\ncase_drafts rollback completed!")


if __name__ == "__main__":
    import sys
    if len(sys.argv) > 1 and sys.argv[1] == "rollback":
        rollback_migration()
    else:
        run_migration()
