# create_tables.py
import sys

from app.database import Base, engine, create_all_tables


def create_tables(drop_existing: bool = False):
    """Create all tables, optionally dropping the existing ones first"""
    try:
        if drop_existing:
            # Import models so drop_all knows every table
            import app.models  # noqa: F401

            Base.metadata.drop_all(bind=engine)
            print("🗑️  Existing tables dropped")

        create_all_tables()
        print("✅ All tables created successfully!")
        return True

    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        return False


if __name__ == "__main__":
    ok = create_tables(drop_existing="--drop" in sys.argv)
    sys.exit(0 if ok else 1)
