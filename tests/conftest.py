"""
Shared fixtures for the Training Memo backend tests.

Strategy:
- The test FastAPI app is built without the lifespan hook (no database, no seeding).
- Every repository factory is overridden with an in-memory fake sharing one FakeStore,
  so the real services run end to end without a database.
- The chat-completion client is replaced by FakeTextClient.
- Access tokens come from a real AuthService, so the bearer check is exercised.
"""

import pytest
from datetime import datetime
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from typing import AsyncGenerator

from app.api.errors import register_exception_handlers
from app.api.router import api_router
from app.core.config import settings
from app.core.dependencies import (
    get_body_weight_repository,
    get_exercise_repository,
    get_menu_repository,
    get_text_client,
    get_user_repository,
    get_workout_repository,
)
from app.models.user import User
from app.services.auth_service import AuthService
from app.services.body_weight_service import BodyWeightService
from app.services.exercise_service import ExerciseService
from app.services.menu_service import MenuService
from app.services.stats_service import StatsService
from app.services.workout_service import WorkoutService
from tests.fakes import (
    FakeBodyWeightRepository,
    FakeExerciseRepository,
    FakeMenuRepository,
    FakeStore,
    FakeTextClient,
    FakeUserRepository,
    FakeWorkoutRepository,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def create_test_app(store: FakeStore, text_client: FakeTextClient) -> FastAPI:
    """Test FastAPI app without the lifespan hook, wired to the in-memory store."""
    test_app = FastAPI(title="Training Memo Test App")
    register_exception_handlers(test_app)
    test_app.include_router(api_router, prefix="/api/v1")

    test_app.dependency_overrides[get_user_repository] = lambda: FakeUserRepository(store)
    test_app.dependency_overrides[get_exercise_repository] = lambda: FakeExerciseRepository(store)
    test_app.dependency_overrides[get_workout_repository] = lambda: FakeWorkoutRepository(store)
    test_app.dependency_overrides[get_menu_repository] = lambda: FakeMenuRepository(store)
    test_app.dependency_overrides[get_body_weight_repository] = lambda: FakeBodyWeightRepository(store)
    test_app.dependency_overrides[get_text_client] = lambda: text_client
    return test_app


def make_auth_service(store: FakeStore) -> AuthService:
    return AuthService(
        FakeUserRepository(store),
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        access_token_expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )


def make_auth_headers(store: FakeStore, user: User) -> dict:
    """Authorization header with a valid access token for ``user``."""
    token = make_auth_service(store).create_access_token(user)
    return {"Authorization": f"Bearer {token}"}


def add_user(store: FakeStore, email: str, name: str = "tester") -> User:
    user = User(
        id=store.next_id(),
        email=email,
        name=name,
        password="not-a-bcrypt-hash",
        created_at=datetime.utcnow(),
    )
    store.users[user.id] = user
    return user


# ---------------------------------------------------------------------------
# Store and catalog
# ---------------------------------------------------------------------------

@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def presets(store):
    """A small preset catalog: bench press, squat, deadlift."""
    return {
        "bench": store.add_exercise("Bench Press", "chest"),
        "squat": store.add_exercise("Squat", "legs"),
        "deadlift": store.add_exercise("Deadlift", "back"),
    }


@pytest.fixture
def user_fixture(store) -> User:
    return add_user(store, "test@example.com", "tester")


@pytest.fixture
def other_user_fixture(store) -> User:
    return add_user(store, "other@example.com", "other")


# ---------------------------------------------------------------------------
# Services over the fake store
# ---------------------------------------------------------------------------

@pytest.fixture
def exercise_service(store) -> ExerciseService:
    return ExerciseService(FakeExerciseRepository(store))


@pytest.fixture
def workout_service(store, exercise_service) -> WorkoutService:
    return WorkoutService(FakeWorkoutRepository(store), exercise_service, default_page_size=20, max_page_size=100)


@pytest.fixture
def menu_service(store, exercise_service) -> MenuService:
    return MenuService(FakeMenuRepository(store), exercise_service)


@pytest.fixture
def body_weight_service(store) -> BodyWeightService:
    return BodyWeightService(FakeBodyWeightRepository(store), default_limit=90)


@pytest.fixture
def stats_service(store) -> StatsService:
    return StatsService(FakeWorkoutRepository(store))


@pytest.fixture
def auth_service(store) -> AuthService:
    return make_auth_service(store)


@pytest.fixture
def text_client() -> FakeTextClient:
    return FakeTextClient()


# ---------------------------------------------------------------------------
# HTTP clients
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(store, text_client) -> AsyncGenerator[AsyncClient, None]:
    """Anonymous client; routes that need a token must send one."""
    app = create_test_app(store, text_client)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def user_client(store, text_client, user_fixture) -> AsyncGenerator[AsyncClient, None]:
    """Client authenticated as ``user_fixture``."""
    app = create_test_app(store, text_client)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=make_auth_headers(store, user_fixture),
    ) as ac:
        yield ac


@pytest.fixture
async def other_client(store, text_client, other_user_fixture) -> AsyncGenerator[AsyncClient, None]:
    """Client authenticated as ``other_user_fixture``."""
    app = create_test_app(store, text_client)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=make_auth_headers(store, other_user_fixture),
    ) as ac:
        yield ac
