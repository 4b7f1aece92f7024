from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_auth_service, get_current_user_id
from app.schemas.auth import UserLogin, UserRegister, UserRead, AuthResponse
from app.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(user: UserRegister, auth: AuthService = Depends(get_auth_service)):
    """Create an account and return an access token for it"""
    return await auth.register(user)


@router.post("/login", response_model=AuthResponse)
async def login(user: UserLogin, auth: AuthService = Depends(get_auth_service)):
    return await auth.login(user)


@router.get("/me", response_model=UserRead)
async def read_me(
        user_id: int = Depends(get_current_user_id),
        auth: AuthService = Depends(get_auth_service),
):
    return await auth.get_user(user_id)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_me(
        user_id: int = Depends(get_current_user_id),
        auth: AuthService = Depends(get_auth_service),
):
    """Erase the account together with every workout, menu and record it owns"""
    await auth.delete_account(user_id)
