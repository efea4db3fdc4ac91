"""Create and inspect the Mind-Script tables."""
import logging
from typing import Dict, List, Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

# Imported for table registration on SQLModel.metadata
from mindscript.models import Project, Reminder, Task, User  # noqa: F401
from mindscript.db.config import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None) -> List[str]:
    """Create all tables that do not exist yet and return the table names."""
    engine = engine or default_engine
    logger.info("Creating all tables...")
    SQLModel.metadata.create_all(engine)
    tables = list_tables(engine)
    logger.info("Available tables: %s", tables)
    return tables


def list_tables(engine: Optional[Engine] = None) -> List[str]:
    """Names of the tables present in the database."""
    return sorted(inspect(engine or default_engine).get_table_names())


def describe_tables(engine: Engine, tables: List[str]) -> Dict[str, Optional[List[str]]]:
    """Column names per table, None for a table that is missing."""
    inspector = inspect(engine)
    present = set(inspector.get_table_names())
    return {
        name: [column["name"] for column in inspector.get_columns(name)] if name in present else None
        for name in tables
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    print("Database tables created successfully.")
