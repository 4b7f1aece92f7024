from fastapi import APIRouter
from app.api.v1.auth import router as auth_router
from app.api.v1.exercises import router as exercises_router
from app.api.v1.workouts import router as workouts_router
from app.api.v1.stats import router as stats_router
from app.api.v1.menus import router as menus_router
from app.api.v1.body_weights import router as body_weights_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(exercises_router, prefix="/exercises", tags=["exercises"])
api_router.include_router(workouts_router, prefix="/workouts", tags=["workouts"])
api_router.include_router(stats_router, prefix="/stats", tags=["stats"])
api_router.include_router(menus_router, prefix="/menus", tags=["menus"])
api_router.include_router(body_weights_router, prefix="/body-weights", tags=["body-weights"])
