from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from wanderlust.db.models import Tour, TourCategory, TourGuide, TourItinerary
from wanderlust.db.repositories import Repository, SortOrder, get_repository

router = APIRouter(tags=["tours"])


@router.get("/tours", response_model=List[Tour])
def list_tours(repo: Repository = Depends(get_repository)):
    return repo.get_all_tours()


@router.get("/tours/featured", response_model=List[Tour])
def list_featured_tours(repo: Repository = Depends(get_repository)):
    return repo.get_featured_tours()


@router.get("/tours/search", response_model=List[Tour])
def search_tours(
    q: Optional[str] = Query(None, description="Text to match in title or summary"),
    category: Optional[List[TourCategory]] = Query(None, description="Categories to include"),
    min_price: Optional[int] = Query(None, ge=0),
    max_price: Optional[int] = Query(None, ge=0),
    sort: SortOrder = Query(SortOrder.POPULAR, description="popular, price-low, price-high, rating or duration"),
    repo: Repository = Depends(get_repository),
):
    """Filter and sort tours. All filters are optional."""
    return repo.search_tours(
        query=q,
        categories=category,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
    )


@router.get("/tours/{tour_id}", response_model=Tour)
def get_tour(tour_id: str, repo: Repository = Depends(get_repository)):
    tour = repo.get_tour(tour_id)
    if tour is None:
        raise HTTPException(status_code=404, detail="Tour not found")
    return tour


@router.get("/tours/{tour_id}/itinerary", response_model=List[TourItinerary])
def get_tour_itinerary(tour_id: str, repo: Repository = Depends(get_repository)):
    """Itinerary days in order. A tour without an itinerary gives an empty list."""
    return repo.get_tour_itinerary(tour_id)


@router.get("/guides", response_model=List[TourGuide])
def list_guides(repo: Repository = Depends(get_repository)):
    return repo.get_all_guides()


@router.get("/guides/{guide_id}", response_model=TourGuide)
def get_guide(guide_id: str, repo: Repository = Depends(get_repository)):
    guide = repo.get_guide(guide_id)
    if guide is None:
        raise HTTPException(status_code=404, detail="Guide not found")
    return guide
