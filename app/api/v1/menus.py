from typing import List

from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_ai_menu_service, get_current_user_id, get_menu_service
from app.schemas.ai_menu import GenerateMenuRequest, GeneratedMenu
from app.schemas.menu import MenuCreate, MenuRead, MenuUpdate
from app.services.ai_menu_service import AIMenuService
from app.services.menu_service import MenuService

router = APIRouter(tags=["menus"])


@router.post("", response_model=MenuRead, status_code=status.HTTP_201_CREATED)
async def create_menu(
        data: MenuCreate,
        user_id: int = Depends(get_current_user_id),
        service: MenuService = Depends(get_menu_service),
):
    return await service.create_menu(user_id, data)


@router.get("", response_model=List[MenuRead])
async def list_menus(
        user_id: int = Depends(get_current_user_id),
        service: MenuService = Depends(get_menu_service),
):
    return await service.get_menus(user_id)


@router.post("/generate", response_model=GeneratedMenu)
async def generate_menu(
        request: GenerateMenuRequest,
        user_id: int = Depends(get_current_user_id),
        service: AIMenuService = Depends(get_ai_menu_service),
):
    """Suggest a menu from the caller's catalog. The result is not saved."""
    return await service.generate_menu(user_id, request)


@router.get("/{menu_id}", response_model=MenuRead)
async def get_menu(
        menu_id: int,
        user_id: int = Depends(get_current_user_id),
        service: MenuService = Depends(get_menu_service),
):
    return await service.get_menu(user_id, menu_id)


@router.put("/{menu_id}", response_model=MenuRead)
async def update_menu(
        menu_id: int,
        data: MenuUpdate,
        user_id: int = Depends(get_current_user_id),
        service: MenuService = Depends(get_menu_service),
):
    return await service.update_menu(user_id, menu_id, data)


@router.delete("/{menu_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_menu(
        menu_id: int,
        user_id: int = Depends(get_current_user_id),
        service: MenuService = Depends(get_menu_service),
):
    await service.delete_menu(user_id, menu_id)
