"""Publisher Routes — organisations that register OSS."""

from fastapi import APIRouter, Depends

from oss_register.api.dependencies import get_mock_registry
from oss_register.core.mock_registry import MockRegistry
from oss_register.services import publishers_service as service

router = APIRouter(prefix="/v1/publishers", tags=["publishers"])


@router.get("")
async def list_publishers(
    registry: MockRegistry = Depends(get_mock_registry),
):
    return await service.list_publishers(registry, {})
