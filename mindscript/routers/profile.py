"""Profile router: render and edit the caller's profile."""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from mindscript.db.config import get_session
from mindscript.errors import NotFoundError
from mindscript.middleware.auth import CurrentUser, ensure_owner, get_current_user
from mindscript.routers.common import require, require_affected, store_errors
from mindscript.schemas.auth import ProfileEditRequest, UserRead, UserRequest
from mindscript.services.user_service import UserService

router = APIRouter(tags=["Profile"], dependencies=[Depends(get_current_user)])


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    """Dependency for getting UserService instance."""
    return UserService(session)


@router.post("/render")
async def profile_render(
    body: UserRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """Return the caller's profile without the password hash."""
    require("User ID is required", body.user_id)
    user_id = ensure_owner(current_user, body.user_id)

    with store_errors("Error fetching profile", user_id=user_id):
        user = service.get(user_id)

    if user is None:
        raise NotFoundError("No user found with this ID")
    return {
        "success": True,
        "message": "Data has been rendered successfully!",
        "data": UserRead.model_validate(user),
    }


@router.post("/edit", status_code=status.HTTP_201_CREATED)
async def profile_edit(
    body: ProfileEditRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    require("User ID is required", body.user_id)
    user_id = ensure_owner(current_user, body.user_id)

    fields = body.model_dump(by_alias=True, exclude_none=True, exclude={"user_id"})
    with store_errors("Error editing profile", user_id=user_id):
        result = service.edit_profile(user_id, fields)

    require_affected(result, "No user found with this ID")
    return {"success": True, "message": "Info has been edited successfully", "userID": user_id}


@router.post("/picture")
async def get_profile_picture(
    body: UserRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    require("User ID is required", body.user_id)
    user_id = ensure_owner(current_user, body.user_id)

    with store_errors("Error fetching profile picture", user_id=user_id):
        user = service.get(user_id)

    if user is None:
        raise NotFoundError("No user found with this ID")
    return {
        "success": True,
        "message": "Picture has been rendered successfully!",
        "user_id": user_id,
        "picture": user.picture,
    }
