"""
Shared link endpoints: listing, categories, share ingestion and comments.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query

from homecal.core.formatting import fallback_link_title, first_url
from homecal.core.models import LinkComment, SharedLink, UserProfile
from homecal.core.search import filter_links_by_category, link_categories
from homecal.schemas.link import CategoryUpdate, CommentCreate, LinkCreate, LinkResponse, ShareRequest
from homecal.services.repository import HouseholdRepository
from homecal.api.deps import get_profile, get_repository

router = APIRouter()


def link_from_share(text: str, subject: str) -> SharedLink:
    """Build a link from share-sheet text: the first URL found plus a title and description."""
    text = text.strip()
    subject = subject.strip()
    url = first_url(text) or first_url(subject) or ""

    if subject:
        title = subject
    elif url:
        title = fallback_link_title(url)
    else:
        title = text[:80]

    return SharedLink(
        title=title,
        url=url,
        description=text[:500] if text and text != url else None,
    )


@router.get("", response_model=List[LinkResponse])
async def list_links(
    category: Optional[str] = Query(None, description="Category filter, 'All' for everything"),
    profile: UserProfile = Depends(get_profile),
    repo: HouseholdRepository = Depends(get_repository),
):
    """Household links, newest first."""
    links = await repo.list_links(profile.household_code)
    return [LinkResponse.from_link(link) for link in filter_links_by_category(links, category)]


@router.get("/categories", response_model=List[str])
async def list_categories(
    profile: UserProfile = Depends(get_profile),
    repo: HouseholdRepository = Depends(get_repository),
):
    return link_categories(await repo.list_links(profile.household_code))


@router.post("", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
async def create_link(
    link_data: LinkCreate,
    profile: UserProfile = Depends(get_profile),
    repo: HouseholdRepository = Depends(get_repository),
):
    url = link_data.url.strip()
    if not url:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="URL is required",
        )
    link = SharedLink(
        title=(link_data.title or "").strip() or fallback_link_title(url),
        url=url,
        description=link_data.description,
        image_url=link_data.image_url,
        category=link_data.category,
    )
    return LinkResponse.from_link(await repo.add_link(profile, link))


@router.post("/share", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
async def share_link(
    share: ShareRequest,
    profile: UserProfile = Depends(get_profile),
    repo: HouseholdRepository = Depends(get_repository),
):
    """Store text handed over by another app's share action."""
    link = link_from_share(share.text, share.subject)
    if not link.url and not link.title:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Nothing to share",
        )
    return LinkResponse.from_link(await repo.add_link(profile, link))


@router.put("/{link_id}/category", response_model=LinkResponse)
async def update_category(
    link_id: str,
    update: CategoryUpdate,
    profile: UserProfile = Depends(get_profile),
    repo: HouseholdRepository = Depends(get_repository),
):
    link = await repo.update_link_category(profile, link_id, update.category)
    if not link:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Link not found",
        )
    return LinkResponse.from_link(link)


@router.post("/{link_id}/comments", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(
    link_id: str,
    comment: CommentCreate,
    profile: UserProfile = Depends(get_profile),
    repo: HouseholdRepository = Depends(get_repository),
):
    link = await repo.add_link_comment(profile, link_id, LinkComment(message=comment.message))
    if not link:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Link not found",
        )
    return LinkResponse.from_link(link)
