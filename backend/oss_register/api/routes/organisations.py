"""Organisation Routes — register and list organisations."""

from fastapi import APIRouter, Depends, status

from oss_register.api.dependencies import get_mock_registry
from oss_register.core.mock_registry import MockRegistry
from oss_register.schemas.organisation import OrganisationSummary
from oss_register.services import public_endpoints_service as service

router = APIRouter(prefix="/v1/organisations", tags=["organisations"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_organisation(
    body: OrganisationSummary,
    registry: MockRegistry = Depends(get_mock_registry),
):
    """Add an organisation by URI and label."""
    return await service.create_organisation(registry, body.to_params())


@router.get("")
async def list_organisations(
    registry: MockRegistry = Depends(get_mock_registry),
):
    """List all organisations."""
    return await service.list_organisations(registry, {})
