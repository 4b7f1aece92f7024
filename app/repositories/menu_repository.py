from typing import List, Optional, Sequence

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.menu import Menu, MenuItem


class MenuRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _with_items():
        return selectinload(Menu.items).selectinload(MenuItem.exercise)

    async def get_by_id(self, menu_id: int) -> Optional[Menu]:
        result = await self.db.execute(
            select(Menu)
            .where(Menu.id == menu_id)
            .options(self._with_items())
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: int) -> List[Menu]:
        result = await self.db.execute(
            select(Menu)
            .where(Menu.user_id == user_id)
            .options(self._with_items())
            .order_by(Menu.updated_at.desc(), Menu.id.desc())
        )
        return list(result.scalars().all())

    async def create_with_items(self, menu: Menu, items: Sequence[MenuItem]) -> Menu:
        menu.items = list(items)
        self.db.add(menu)
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return menu

    async def update_with_items(self, menu: Menu, items: Sequence[MenuItem]) -> Menu:
        menu.items = list(items)
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return menu

    async def delete(self, menu_id: int) -> None:
        try:
            await self.db.execute(delete(MenuItem).where(MenuItem.menu_id == menu_id))
            await self.db.execute(delete(Menu).where(Menu.id == menu_id))
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
