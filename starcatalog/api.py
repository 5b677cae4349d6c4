"""REST API endpoints for the star catalog."""

from typing import Dict, List

from fastapi import APIRouter, Depends, Query, Response

from starcatalog.env_config import DATA_DIR, STORAGE_BACKEND
from starcatalog.models.dto import ErrorResponse, StarDTO, StarListResponse, StarRequest
from starcatalog.repositories.base import Repository
from starcatalog.repositories.star_repository import create_star_repository
from starcatalog.services.star_service import StarService

router = APIRouter()

_star_repo = None
_star_service = None


def get_star_repo() -> Repository:
    """Get star repository instance."""
    global _star_repo
    if _star_repo is None:
        _star_repo = create_star_repository(STORAGE_BACKEND, DATA_DIR)
    return _star_repo


def get_star_service(
    star_repo: Repository = Depends(get_star_repo)
) -> StarService:
    """Get star service instance."""
    global _star_service
    if _star_service is None:
        _star_service = StarService(star_repo)
    return _star_service


@router.get("/stars", response_model=StarListResponse)
async def list_stars(
    star_service: StarService = Depends(get_star_service),
):
    """List all stored stars."""
    stars = star_service.list_stars()
    return StarListResponse(
        stars=[StarDTO.model_validate(s) for s in stars],
        total=len(stars),
    )


@router.get("/stars/{star_id}", response_model=StarDTO, responses={404: {"model": ErrorResponse}})
async def get_star(
    star_id: int,
    star_service: StarService = Depends(get_star_service),
):
    """Get a star by id."""
    return StarDTO.model_validate(star_service.get_star_by_id(star_id))


@router.post("/stars", response_model=StarDTO, status_code=201, responses={400: {"model": ErrorResponse}})
async def add_star(
    request: StarRequest,
    star_service: StarService = Depends(get_star_service),
):
    """Create a new star."""
    return StarDTO.model_validate(star_service.add_star(request.to_domain()))


@router.put("/stars/{star_id}", response_model=StarDTO, responses={404: {"model": ErrorResponse}})
async def update_star(
    star_id: int,
    request: StarRequest,
    star_service: StarService = Depends(get_star_service),
):
    """Replace name and distance of an existing star."""
    return StarDTO.model_validate(star_service.update_star(star_id, request.to_domain()))


@router.delete("/stars/{star_id}", status_code=204)
async def delete_star(
    star_id: int,
    star_service: StarService = Depends(get_star_service),
):
    """Delete a star. Unknown ids still return 204."""
    star_service.delete_star(star_id)
    return Response(status_code=204)


@router.post("/stars/closest", response_model=List[StarDTO])
async def find_closest_stars(
    stars: List[StarRequest],
    size: int = Query(...),
    star_service: StarService = Depends(get_star_service),
):
    """Return the `size` closest stars of the posted list."""
    closest = star_service.find_closest_stars([s.to_domain() for s in stars], size)
    return [StarDTO.model_validate(s) for s in closest]


@router.post("/stars/distances", response_model=Dict[int, int])
async def get_number_of_stars_by_distances(
    stars: List[StarRequest],
    star_service: StarService = Depends(get_star_service),
):
    """Count the posted stars per distance, ascending by distance."""
    return star_service.get_number_of_stars_by_distances([s.to_domain() for s in stars])


@router.post("/stars/unique", response_model=List[StarDTO])
async def get_unique_stars(
    stars: List[StarRequest],
    star_service: StarService = Depends(get_star_service),
):
    """De-duplicate the posted stars by name, first occurrence wins."""
    unique = star_service.get_unique_stars([s.to_domain() for s in stars])
    return [StarDTO.model_validate(s) for s in unique]
