import logging
from datetime import datetime
from typing import List, Sequence

from app.core.exceptions import InvalidInputError, MenuNotFoundError
from app.models.menu import Menu, MenuItem
from app.repositories.contracts import MenuRepositoryContract
from app.schemas.menu import MenuCreate, MenuItemInput, MenuUpdate
from app.services.exercise_service import ExerciseService
from app.services.ownership import ensure_owner

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100


class MenuService:
    """Lifecycle of the Menu aggregate (a reusable workout template)."""

    def __init__(self, repo: MenuRepositoryContract, exercises: ExerciseService):
        self.repo = repo
        self.exercises = exercises

    @staticmethod
    def _check_name(name: str) -> None:
        if not name or not name.strip():
            raise InvalidInputError("menu name is required")
        if len(name) > MAX_NAME_LENGTH:
            raise InvalidInputError(f"menu name must be at most {MAX_NAME_LENGTH} characters")

    async def _build_items(self, user_id: int, items: Sequence[MenuItemInput]) -> List[MenuItem]:
        if not items:
            raise InvalidInputError("at least one item is required")

        visible = await self.exercises.visible_ids(user_id)
        unknown = sorted({i.exercise_id for i in items} - visible)
        if unknown:
            raise InvalidInputError(f"unknown exercise id: {unknown[0]}")

        return [
            MenuItem(
                exercise_id=i.exercise_id,
                order_number=i.order_number,
                target_sets=i.target_sets,
                target_reps=i.target_reps,
                target_weight=i.target_weight,
                note=i.note,
            )
            for i in items
        ]

    async def create_menu(self, user_id: int, data: MenuCreate) -> Menu:
        self._check_name(data.name)
        items = await self._build_items(user_id, data.items)

        menu = Menu(user_id=user_id, name=data.name, description=data.description)
        menu = await self.repo.create_with_items(menu, items)
        logger.info("User %s created menu %s with %d items", user_id, menu.id, len(items))
        return await self.get_menu(user_id, menu.id)

    async def get_menu(self, user_id: int, menu_id: int) -> Menu:
        menu = await self.repo.get_by_id(menu_id)
        return ensure_owner(menu, user_id, MenuNotFoundError)

    async def get_menus(self, user_id: int) -> List[Menu]:
        """Most recently updated first."""
        return await self.repo.list_by_user(user_id)

    async def update_menu(self, user_id: int, menu_id: int, data: MenuUpdate) -> Menu:
        menu = await self.get_menu(user_id, menu_id)
        self._check_name(data.name)
        items = await self._build_items(user_id, data.items)

        menu.name = data.name
        menu.description = data.description
        menu.updated_at = datetime.utcnow()
        await self.repo.update_with_items(menu, items)
        logger.info("User %s replaced menu %s with %d items", user_id, menu_id, len(items))
        return await self.get_menu(user_id, menu_id)

    async def delete_menu(self, user_id: int, menu_id: int) -> None:
        await self.get_menu(user_id, menu_id)
        await self.repo.delete(menu_id)
        logger.info("User %s deleted menu %s", user_id, menu_id)
