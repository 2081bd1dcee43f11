"""
Link resolution.
Every record is addressed by its slug when it has one, otherwise by its numeric id.
"""

# Percent-encode path segments so odd slugs cannot break the route
from urllib.parse import quote  # URL-path encoding

# Import our MovieRecord data class for type hints
from .models import MovieRecord  # structured movie record

# Sort keys understood by the full listing page
VIEW_ALL_SORT_KEYS = ('recent', 'popular', 'rating')


def resolve_link(record: MovieRecord) -> str:
	"""Return the canonical path segment for a record: slug if non-empty, else the decimal id."""
	if isinstance(record.slug, str) and record.slug:  # blank slugs do not count
		return record.slug
	return str(record.id)  # numeric fallback


def watch_href(record: MovieRecord) -> str:
	"""Player route used by the hero's "Watch Now" button."""
	return f"/watch/{quote(resolve_link(record), safe='')}"  # '/' inside a slug is encoded too


def movie_href(record: MovieRecord) -> str:
	"""Detail route used by "More Info" and by every carousel card."""
	return f"/movie/{quote(resolve_link(record), safe='')}"


def view_all_href(sort_key: str) -> str:
	"""Full listing route for a section's "View All" link."""
	if sort_key not in VIEW_ALL_SORT_KEYS:  # closed set
		raise ValueError(f"Unknown sort key: {sort_key}")
	return f"/movies?sort={sort_key}"
