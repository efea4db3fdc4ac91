"""Authentication router: register, login and logout."""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from mindscript.db.config import get_session
from mindscript.middleware.auth import CurrentUser, get_current_user
from mindscript.routers.common import store_errors
from mindscript.schemas.auth import LoginRequest, RegisterRequest
from mindscript.services.auth_service import AuthService
from mindscript.utils.logger import api_logger

router = APIRouter(tags=["Authentication"])  # No prefix since main.py adds /api prefix


def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    """Dependency for getting AuthService instance."""
    return AuthService(session)


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    with store_errors("Internal server error", route="register"):
        user_id = await service.register(
            username=request.username,
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=request.password,
        )

    api_logger.info("User registered", user_id=user_id)
    return {
        "success": True,
        "message": "User created successfully",
        "userID": user_id,
    }


@router.post("/login")
async def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Check credentials and issue a one hour bearer token."""
    with store_errors("Internal server error", route="login"):
        token, user_id = await service.authenticate(request.email, request.password)

    api_logger.info("User logged in", user_id=user_id)
    return {
        "success": True,
        "message": "Login successful",
        "token": token,
        "userID": user_id,
    }


@router.post("/logout")
async def logout(current_user: CurrentUser = Depends(get_current_user)):
    """Tokens are stateless, so there is nothing to invalidate server side."""
    api_logger.info("User logged out", user_id=current_user.user_id)
    return {"success": True, "message": "Logout successful"}
