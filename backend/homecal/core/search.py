"""
Text search over events and shared links.
"""
from typing import Iterable, List, Optional

from homecal.core.models import Event, SharedLink

ALL_CATEGORIES = "All"


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().casefold()


def _haystack(*fields: Optional[str]) -> str:
    return " ".join(field or "" for field in fields).casefold()


def search_events(events: Iterable[Event], query: Optional[str]) -> List[Event]:
    """Events whose title, notes or person tag contain the query, by start instant."""
    needle = normalize_query(query)
    if not needle:
        return []
    matches = [
        event for event in events
        if needle in _haystack(event.title, event.notes, event.person_tag)
    ]
    return sorted(matches, key=lambda event: event.start_epoch_millis)


def search_links(links: Iterable[SharedLink], query: Optional[str]) -> List[SharedLink]:
    """Links matching the query on title, url, description or category, order kept."""
    needle = normalize_query(query)
    if not needle:
        return []
    return [
        link for link in links
        if needle in _haystack(link.title, link.url, link.description, link.category)
    ]


def link_categories(links: Iterable[SharedLink]) -> List[str]:
    return sorted({link.category for link in links if link.category.strip()})


def filter_links_by_category(links: Iterable[SharedLink], category: Optional[str]) -> List[SharedLink]:
    wanted = (category or "").strip()
    if not wanted or wanted == ALL_CATEGORIES:
        return list(links)
    return [link for link in links if link.category.casefold() == wanted.casefold()]
