"""Git Organisation Schemas — registration body and list filters."""

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field


class GitOrganisationInput(BaseModel):
    """Git organisation URL linked to the organisation that owns it."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    url: AnyHttpUrl
    organisation_uri: AnyHttpUrl = Field(alias="organisationUri")

    def to_params(self) -> dict:
        return {
            "gitOrganisation": self.model_dump(by_alias=True, mode="json"),
        }


class ListGitOrganisationsQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int | None = Field(None, ge=1)
    per_page: int | None = Field(None, ge=1, le=100, alias="perPage")
    organisation: str | None = None

    def to_params(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
