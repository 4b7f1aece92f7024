"""
Menu generation backed by a chat-completion model.

The model's answer is untrusted: every suggested item is validated and
checked against the caller's visible catalog before it is returned. The
result is a candidate only; saving it goes through ``MenuService``.
"""

import json
import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from app.core.exceptions import MalformedResponseError, NoValidItemsError
from app.models.exercise import Exercise
from app.schemas.ai_menu import (
    GeneratedItemPayload,
    GeneratedMenu,
    GeneratedMenuItem,
    GeneratedMenuPayload,
    GenerateMenuRequest,
)
from app.schemas.exercise import ExerciseRead
from app.services.ai_client import TextGenerationClient
from app.services.exercise_service import ExerciseService

logger = logging.getLogger(__name__)

MUSCLE_GROUP_LABELS = {
    "chest": "Chest",
    "back": "Back",
    "shoulders": "Shoulders",
    "arms": "Arms",
    "legs": "Legs",
    "abs": "Abs",
    "other": "Other",
}

RESPONSE_SHAPE = """{
  "name": "menu name",
  "description": "short description",
  "items": [
    {"exercise_id": 1, "order_number": 1, "target_sets": 3, "target_reps": 10, "target_weight": 40.0, "note": "optional"}
  ]
}"""


class AIMenuService:
    def __init__(self, exercises: ExerciseService, client: TextGenerationClient):
        self.exercises = exercises
        self.client = client

    def _build_system_prompt(self, catalog: List[Exercise]) -> str:
        lines = [
            f"- {e.id}: {e.name} ({MUSCLE_GROUP_LABELS.get(e.muscle_group, e.muscle_group)})"
            for e in catalog
        ]
        return (
            "You are a personal strength coach. Build one workout menu for the user.\n"
            "Use ONLY exercises from this list, referenced by their numeric id:\n"
            + "\n".join(lines)
            + "\n\nNever use an exercise_id that is not in the list.\n"
            "Answer with a single JSON object of exactly this shape and nothing else:\n"
            + RESPONSE_SHAPE
        )

    def _build_user_message(self, request: GenerateMenuRequest) -> str:
        parts = [
            f"Goal: {request.goal}",
            f"Fitness level: {request.fitness_level}",
            f"Training days per week: {request.days_per_week}",
            f"Session duration: {request.duration_minutes} minutes",
        ]
        if request.target_muscle_groups:
            groups = ", ".join(MUSCLE_GROUP_LABELS[g.value] for g in request.target_muscle_groups)
            parts.append(f"Target muscle groups: {groups}")
        if request.notes:
            parts.append(f"Notes: {request.notes}")
        return "\n".join(parts)

    @staticmethod
    def _parse_payload(text: str) -> GeneratedMenuPayload:
        # models sometimes wrap the object in prose or code fences
        start = text.find("{")
        end = text.rfind("}")
        if start == -1 or end <= start:
            raise MalformedResponseError()
        try:
            data = json.loads(text[start:end + 1])
            return GeneratedMenuPayload.model_validate(data)
        except (ValueError, ValidationError):
            raise MalformedResponseError()

    @staticmethod
    def _ground_items(raw_items: List[Any], lookup: Dict[int, Exercise]) -> List[GeneratedMenuItem]:
        items = []
        for raw in raw_items:
            try:
                item = GeneratedItemPayload.model_validate(raw)
            except ValidationError:
                logger.warning("Dropped generated item with invalid shape: %r", raw)
                continue

            exercise = lookup.get(item.exercise_id)
            if exercise is None:
                logger.warning("Dropped generated item with unknown exercise id %s", item.exercise_id)
                continue

            items.append(
                GeneratedMenuItem(
                    **item.model_dump(),
                    exercise=ExerciseRead.model_validate(exercise),
                )
            )
        return sorted(items, key=lambda i: i.order_number)

    async def generate_menu(self, user_id: int, request: GenerateMenuRequest) -> GeneratedMenu:
        catalog = await self.exercises.list_visible(user_id)
        lookup = {e.id: e for e in catalog}

        text = await self.client.complete(
            self._build_system_prompt(catalog),
            self._build_user_message(request),
            response_format={"type": "json_object"},
        )
        payload = self._parse_payload(text)

        items = self._ground_items(payload.items, lookup)
        if not items:
            raise NoValidItemsError()

        logger.info("Generated menu for user %s with %d of %d items kept", user_id, len(items), len(payload.items))
        return GeneratedMenu(name=payload.name, description=payload.description, items=items)
