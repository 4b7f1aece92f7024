from typing import List

from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_body_weight_service, get_current_user_id
from app.schemas.body_weight import BodyWeightInput, BodyWeightRead
from app.services.body_weight_service import BodyWeightService

router = APIRouter(tags=["body-weights"])


@router.post("", response_model=BodyWeightRead)
async def record_body_weight(
        data: BodyWeightInput,
        user_id: int = Depends(get_current_user_id),
        service: BodyWeightService = Depends(get_body_weight_service),
):
    """Create the record for the date, or overwrite the existing one"""
    return await service.create_or_update(user_id, data)


@router.get("", response_model=List[BodyWeightRead])
async def list_body_weights(
        limit: int = 90,
        user_id: int = Depends(get_current_user_id),
        service: BodyWeightService = Depends(get_body_weight_service),
):
    return await service.list_records(user_id, limit)


@router.get("/range", response_model=List[BodyWeightRead])
async def list_body_weights_in_range(
        start: str,
        end: str,
        user_id: int = Depends(get_current_user_id),
        service: BodyWeightService = Depends(get_body_weight_service),
):
    return await service.list_by_date_range(user_id, start, end)


@router.get("/latest", response_model=BodyWeightRead)
async def latest_body_weight(
        user_id: int = Depends(get_current_user_id),
        service: BodyWeightService = Depends(get_body_weight_service),
):
    return await service.latest(user_id)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_body_weight(
        record_id: int,
        user_id: int = Depends(get_current_user_id),
        service: BodyWeightService = Depends(get_body_weight_service),
):
    await service.delete(user_id, record_id)
