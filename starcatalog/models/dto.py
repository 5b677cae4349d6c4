"""Data Transfer Objects - API contracts."""

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List

from starcatalog.models.domain import Star


class StarDTO(BaseModel):
    """Star data for API responses."""
    id: Optional[int] = None
    name: str
    distance: int

    model_config = ConfigDict(from_attributes=True)


class StarRequest(BaseModel):
    """Star payload for create/update requests and analytics inputs."""
    name: str = Field(..., min_length=1, pattern=r"\S")
    distance: int = Field(..., ge=0)

    def to_domain(self) -> Star:
        """Build a transient domain star from the request."""
        return Star(name=self.name, distance=self.distance)


class StarListResponse(BaseModel):
    """Response with list of stars."""
    stars: List[StarDTO]
    total: int


class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str
