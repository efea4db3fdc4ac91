"""Main FastAPI application for the Mind-Script backend."""
import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mindscript import __version__, config
from mindscript.db.init import init_db
from mindscript.errors import AppError
from mindscript.middleware.cors import add_cors_middleware
from mindscript.routers import (
    auth_router,
    database_router,
    profile_router,
    projects_router,
    reminders_router,
    tasks_router,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Mind-Script API",
    description="REST API for users, tasks, projects and reminders",
    version=__version__,
)

add_cors_middleware(app)


def error_response(
    status_code: int,
    message: str,
    detail: str = None,
    headers: dict = None,
    **payload,
) -> JSONResponse:
    """Failure envelope; diagnostic detail is only attached in development."""
    content = {"success": False, "message": message, **payload}
    if detail and config.is_development():
        content["error"] = detail
    return JSONResponse(status_code=status_code, content=content, headers=headers)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.status_code, exc.message, exc.detail, exc.headers, **exc.payload)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return error_response(status.HTTP_400_BAD_REQUEST, "; ".join(problems) or "Invalid request body")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND and request.url.path.startswith("/api/"):
        return error_response(exc.status_code, "API endpoint not found", path=request.url.path)
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", str(exc))


@app.on_event("startup")
async def startup_event():
    """Create missing tables on startup."""
    try:
        init_db()
    except Exception as e:
        logger.warning("Database initialization failed: %s", e)
        logger.warning("Server will continue but database operations may fail.")
    logger.info("Application startup complete (environment: %s).", config.ENVIRONMENT)


@app.get("/")
async def root():
    """Root endpoint - API health message."""
    return {
        "success": True,
        "message": "API is running successfully",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": config.ENVIRONMENT,
    }


@app.get("/health")
async def health_check():
    return {"success": True, "status": "healthy", "version": __version__}


app.include_router(auth_router, prefix="/api")  # /api/register, /api/login, /api/logout
app.include_router(tasks_router, prefix="/api/tasks")
app.include_router(projects_router, prefix="/api/projects")
app.include_router(reminders_router, prefix="/api/reminders")
app.include_router(profile_router, prefix="/api/profile")
app.include_router(database_router, prefix="/api/database")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mindscript.main:app",
        host="0.0.0.0",
        port=config.SERVER_PORT,
        reload=config.is_development(),
    )
