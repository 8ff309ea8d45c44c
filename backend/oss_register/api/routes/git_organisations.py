"""Git Organisation Routes — register and list git organisations."""

from fastapi import APIRouter, Depends, Query, status

from oss_register.api.dependencies import get_mock_registry
from oss_register.core.mock_registry import MockRegistry
from oss_register.schemas.git_organisation import (
    GitOrganisationInput, ListGitOrganisationsQuery,
)
from oss_register.services import git_organisations_service as service

router = APIRouter(prefix="/v1/gitOrganisations", tags=["gitOrganisations"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_git_organisation(
    body: GitOrganisationInput,
    registry: MockRegistry = Depends(get_mock_registry),
):
    return await service.create_git_organisation(registry, body.to_params())


@router.get("")
async def list_git_organisations(
    page: int | None = Query(None, ge=1),
    per_page: int | None = Query(None, ge=1, le=100, alias="perPage"),
    organisation: str | None = Query(None),
    registry: MockRegistry = Depends(get_mock_registry),
):
    query = ListGitOrganisationsQuery(
        page=page, per_page=per_page, organisation=organisation,
    )
    return await service.list_git_organisations(registry, query.to_params())
