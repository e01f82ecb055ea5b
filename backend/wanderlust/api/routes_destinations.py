from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from wanderlust.db.models import Continent, Destination, Tour
from wanderlust.db.repositories import DestinationSort, Repository, get_repository

router = APIRouter(tags=["destinations"])


@router.get("/destinations", response_model=List[Destination])
def list_destinations(repo: Repository = Depends(get_repository)):
    return repo.get_all_destinations()


@router.get("/destinations/featured", response_model=List[Destination])
def list_featured_destinations(repo: Repository = Depends(get_repository)):
    return repo.get_featured_destinations()


@router.get("/destinations/search", response_model=List[Destination])
def search_destinations(
    q: Optional[str] = Query(None, description="Text to match in name or country"),
    continent: Optional[List[Continent]] = Query(None, description="Continents to include"),
    min_price: Optional[int] = Query(None, ge=0, description="Lowest starting price"),
    max_price: Optional[int] = Query(None, ge=0, description="Highest starting price"),
    sort: DestinationSort = Query(DestinationSort.POPULAR, description="popular, price-low, price-high or rating"),
    repo: Repository = Depends(get_repository),
):
    """
    Filter and sort destinations.
    All filters are optional; with none given every destination is returned.
    """
    return repo.search_destinations(
        query=q,
        continents=continent,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
    )


@router.get("/destinations/{destination_id}", response_model=Destination)
def get_destination(destination_id: str, repo: Repository = Depends(get_repository)):
    destination = repo.get_destination(destination_id)
    if destination is None:
        raise HTTPException(status_code=404, detail="Destination not found")
    return destination


@router.get("/destination/{destination_id}/tours", response_model=List[Tour])
def list_tours_for_destination(destination_id: str, repo: Repository = Depends(get_repository)):
    """Tours that point at this destination. Unknown ids give an empty list."""
    return repo.get_tours_by_destination(destination_id)
