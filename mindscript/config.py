"""Environment configuration for the Mind-Script backend."""
import os

from dotenv import load_dotenv

# Load variables from a local .env file, real environment wins
load_dotenv()

ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

# Database connection, SQLite fallback for local development
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./mindscript.db")

# Token signing
JWT_SECRET = os.environ.get("JWT_SECRET", "mindscript-dev-secret-change-me")
JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
JWT_EXPIRE_MINUTES = int(os.environ.get("JWT_EXPIRE_MINUTES", "60"))

# Password hashing cost
BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", "10"))

SERVER_PORT = int(os.environ.get("SERVER_PORT", "5000"))

FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5173")

ALLOWED_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5000",
]

if FRONTEND_URL and FRONTEND_URL not in ALLOWED_ORIGINS:
    ALLOWED_ORIGINS.append(FRONTEND_URL)

for origin in os.environ.get("CORS_ORIGINS", "").split(","):
    origin = origin.strip()
    if origin and origin not in ALLOWED_ORIGINS:
        ALLOWED_ORIGINS.append(origin)


def is_development() -> bool:
    """Whether diagnostic error detail may be sent to clients."""
    return ENVIRONMENT == "development"
