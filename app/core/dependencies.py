from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.core.db import get_db
from app.repositories import (
    BodyWeightRepository,
    ExerciseRepository,
    MenuRepository,
    UserRepository,
    WorkoutRepository,
)
from app.services.ai_client import OpenAIChatClient, TextGenerationClient
from app.services.ai_menu_service import AIMenuService
from app.services.auth_service import AuthService
from app.services.body_weight_service import BodyWeightService
from app.services.exercise_service import ExerciseService
from app.services.menu_service import MenuService
from app.services.stats_service import StatsService
from app.services.workout_service import WorkoutService


security = HTTPBearer()


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """Repository factories are injected into the services through Depends."""
    return UserRepository(db)


def get_exercise_repository(db: AsyncSession = Depends(get_db)) -> ExerciseRepository:
    return ExerciseRepository(db)


def get_workout_repository(db: AsyncSession = Depends(get_db)) -> WorkoutRepository:
    return WorkoutRepository(db)


def get_menu_repository(db: AsyncSession = Depends(get_db)) -> MenuRepository:
    return MenuRepository(db)


def get_body_weight_repository(db: AsyncSession = Depends(get_db)) -> BodyWeightRepository:
    return BodyWeightRepository(db)


def get_auth_service(
        repo: UserRepository = Depends(get_user_repository),
        settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(
        repo,
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        access_token_expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )


def get_exercise_service(repo: ExerciseRepository = Depends(get_exercise_repository)) -> ExerciseService:
    return ExerciseService(repo)


def get_workout_service(
        repo: WorkoutRepository = Depends(get_workout_repository),
        exercises: ExerciseService = Depends(get_exercise_service),
        settings: Settings = Depends(get_settings),
) -> WorkoutService:
    return WorkoutService(
        repo,
        exercises,
        default_page_size=settings.DEFAULT_PAGE_SIZE,
        max_page_size=settings.MAX_PAGE_SIZE,
    )


def get_menu_service(
        repo: MenuRepository = Depends(get_menu_repository),
        exercises: ExerciseService = Depends(get_exercise_service),
) -> MenuService:
    return MenuService(repo, exercises)


def get_body_weight_service(
        repo: BodyWeightRepository = Depends(get_body_weight_repository),
        settings: Settings = Depends(get_settings),
) -> BodyWeightService:
    return BodyWeightService(repo, default_limit=settings.BODY_WEIGHT_DEFAULT_LIMIT)


def get_stats_service(repo: WorkoutRepository = Depends(get_workout_repository)) -> StatsService:
    return StatsService(repo)


def get_text_client(settings: Settings = Depends(get_settings)) -> TextGenerationClient:
    return OpenAIChatClient(
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.OPENAI_BASE_URL,
        model=settings.OPENAI_MODEL,
        timeout=settings.AI_REQUEST_TIMEOUT,
    )


def get_ai_menu_service(
        exercises: ExerciseService = Depends(get_exercise_service),
        client: TextGenerationClient = Depends(get_text_client),
) -> AIMenuService:
    return AIMenuService(exercises, client)


async def get_current_user_id(
        credentials: HTTPAuthorizationCredentials = Depends(security),
        auth: AuthService = Depends(get_auth_service),
) -> int:
    return auth.verify_token(credentials.credentials)
