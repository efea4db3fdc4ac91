"""Database management routes for setup and debugging."""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from mindscript.db.config import get_session
from mindscript.db.init import describe_tables, init_db, list_tables
from mindscript.middleware.auth import get_current_user
from mindscript.routers.common import store_errors

router = APIRouter(tags=["Database"], dependencies=[Depends(get_current_user)])


@router.post("/setup")
async def setup_database(session: Session = Depends(get_session)):
    """Create any missing tables."""
    with store_errors("Database setup failed"):
        tables = init_db(session.get_bind())
    return {
        "success": True,
        "message": "Database setup completed successfully",
        "tables": tables,
    }


@router.get("/check")
async def check_database(session: Session = Depends(get_session)):
    """Report the tables present and the columns of the core tables."""
    with store_errors("Database check failed"):
        bind = session.get_bind()
        tables = list_tables(bind)
        structure = describe_tables(bind, ["users", "tasks"])
    return {
        "success": True,
        "message": "Database connection successful",
        "tables": tables,
        "structure": structure,
    }
