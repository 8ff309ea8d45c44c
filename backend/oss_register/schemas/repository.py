"""Repository Schemas — repository registration body and list filters.

Invariants:
    - PostRepository URLs are absolute http(s) URLs
    - ListRepositoriesQuery.page >= 1, per_page in 1..100
    - filter_ids() returns None for missing or blank ids; to_params() sends it trimmed
    - to_params() emits only supplied fields, keyed by wire (camelCase) name

Design Decisions:
    - str Enum for status: serializes to JSON without custom encoders
    - to_params() excludes unset fields so the echoed envelope matches the request
"""

from enum import Enum

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field


class PublicCodeStatus(str, Enum):
    """publiccode.yml classification filter."""
    ALL = "all"
    WITH_PUBLIC_CODE = "withPublicCode"
    WITHOUT_PUBLIC_CODE = "withoutPublicCode"


class PostRepository(BaseModel):
    """Registration request for a repository of a git organisation."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    git_organisation_url: AnyHttpUrl = Field(alias="gitOrganisationUrl")
    organisation_url: AnyHttpUrl = Field(alias="organisationUrl")

    def to_params(self) -> dict:
        return {
            "postRepository": self.model_dump(by_alias=True, mode="json"),
        }


class ListRepositoriesQuery(BaseModel):
    """Query filters for listing repositories."""
    model_config = ConfigDict(populate_by_name=True)

    status: PublicCodeStatus | None = None
    page: int | None = Field(None, ge=1)
    per_page: int | None = Field(None, ge=1, le=100, alias="perPage")
    organisation: str | None = None
    ids: str | None = None

    def filter_ids(self) -> str | None:
        """Trimmed ids filter, None when absent or blank."""
        if self.ids is None:
            return None
        trimmed = self.ids.strip()
        return trimmed or None

    def to_params(self) -> dict:
        params = self.model_dump(
            by_alias=True, exclude_none=True, exclude={"ids"}, mode="json",
        )
        ids = self.filter_ids()
        if ids is not None:
            params["ids"] = ids
        return params


class SearchRepositoriesQuery(BaseModel):
    """Title search over registered repositories."""
    model_config = ConfigDict(populate_by_name=True)

    q: str = Field(min_length=1)
    page: int | None = Field(None, ge=1)
    per_page: int | None = Field(None, ge=1, le=100, alias="perPage")
    organisation: str | None = None

    def to_params(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
