"""Repository Routes — register, search, retrieve and list repositories.

Invariants:
    - /_search declared before /{repository_id} so it is never parsed as an id
    - Query filters reach the service only when supplied
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from oss_register.api.dependencies import get_mock_registry
from oss_register.core.mock_registry import MockRegistry
from oss_register.schemas.repository import (
    ListRepositoriesQuery, PostRepository, PublicCodeStatus,
    SearchRepositoriesQuery,
)
from oss_register.services import repositories_service as service

router = APIRouter(prefix="/v1/repositories", tags=["repositories"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_repository(
    body: PostRepository,
    registry: MockRegistry = Depends(get_mock_registry),
):
    """Register a new OSS repository."""
    return await service.create_repository(registry, body.to_params())


@router.get("/_search")
async def search_repositories(
    q: str = Query(..., min_length=1),
    page: int | None = Query(None, ge=1),
    per_page: int | None = Query(None, ge=1, le=100, alias="perPage"),
    organisation: str | None = Query(None),
    registry: MockRegistry = Depends(get_mock_registry),
):
    """Search registered repositories by title."""
    query = SearchRepositoriesQuery(
        q=q, page=page, per_page=per_page, organisation=organisation,
    )
    return await service.search_repositories(registry, query.to_params())


@router.get("/{repository_id}")
async def get_repository_by_id(
    repository_id: UUID,
    registry: MockRegistry = Depends(get_mock_registry),
):
    """Retrieve one repository by its id."""
    return await service.get_repository_by_id(
        registry, {"id": str(repository_id)},
    )


@router.get("")
async def list_repositories(
    status_filter: PublicCodeStatus | None = Query(None, alias="status"),
    page: int | None = Query(None, ge=1),
    per_page: int | None = Query(None, ge=1, le=100, alias="perPage"),
    organisation: str | None = Query(None),
    ids: str | None = Query(None),
    registry: MockRegistry = Depends(get_mock_registry),
):
    """List registered repositories with optional filters."""
    query = ListRepositoriesQuery(
        status=status_filter, page=page, per_page=per_page,
        organisation=organisation, ids=ids,
    )
    return await service.list_repositories(registry, query.to_params())
