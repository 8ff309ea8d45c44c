"""Organisation Schemas — organisation summary request body.

Invariants:
    - uri and label are required, non-blank after stripping
"""

from pydantic import BaseModel, ConfigDict, field_validator


class OrganisationSummary(BaseModel):
    """Organisation identified by its URI, with a human-readable label."""
    model_config = ConfigDict(extra="forbid")

    uri: str
    label: str

    @field_validator("uri", "label")
    @classmethod
    def strip_value(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v

    def to_params(self) -> dict:
        return {"organisationSummary": self.model_dump()}
