"""
Editorial content: testimonials, blog posts, team members and FAQs.
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import List

from wanderlust.db.models import BlogPost, Faq, TeamMember, Testimonial
from wanderlust.db.repositories import Repository, get_repository

router = APIRouter(tags=["content"])


@router.get("/testimonials", response_model=List[Testimonial])
def list_testimonials(repo: Repository = Depends(get_repository)):
    return repo.get_all_testimonials()


@router.get("/testimonials/featured", response_model=List[Testimonial])
def list_featured_testimonials(repo: Repository = Depends(get_repository)):
    return repo.get_featured_testimonials()


@router.get("/blog", response_model=List[BlogPost])
def list_blog_posts(repo: Repository = Depends(get_repository)):
    """Blog posts, newest first."""
    return repo.get_all_blog_posts()


@router.get("/blog/featured", response_model=List[BlogPost])
def list_featured_blog_posts(repo: Repository = Depends(get_repository)):
    return repo.get_featured_blog_posts()


@router.get("/blog/{slug}", response_model=BlogPost)
def get_blog_post(slug: str, repo: Repository = Depends(get_repository)):
    post = repo.get_blog_post(slug)
    if post is None:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post


@router.get("/team", response_model=List[TeamMember])
def list_team_members(repo: Repository = Depends(get_repository)):
    return repo.get_all_team_members()


@router.get("/faqs", response_model=List[Faq])
def list_faqs(repo: Repository = Depends(get_repository)):
    return repo.get_all_faqs()


@router.get("/faqs/tour/{tour_id}", response_model=List[Faq])
def list_faqs_for_tour(tour_id: str, repo: Repository = Depends(get_repository)):
    """FAQs for one tour plus every general FAQ."""
    return repo.get_faqs_by_tour(tour_id)
