"""
View model builder.
Converts a composed CatalogPage into display-ready cards: resolved links, formatted ratings,
secondary metadata and artwork URLs with placeholder fallback.
"""

# Plain containers for the presentation layer
from dataclasses import dataclass, field  # record-like classes
from typing import List, Optional  # type hints

# Project helpers for links, artwork and the composed page
from .links import movie_href, resolve_link, watch_href  # route building
from .media import MediaResolver, image_or_placeholder  # artwork URLs with fallback
from .models import CatalogPage, ImageKind, MovieRecord  # composed structures

# Copy shown when the catalog has nothing recent or popular
EMPTY_STATE_TITLE = 'No Movies Available'
EMPTY_STATE_MESSAGE = (
	'It looks like there are no movies in the database yet. '
	'Check back later or contact an administrator.'
)
ADMIN_LOGIN_HREF = '/admin/login'


@dataclass
class CardView:
	"""One carousel card."""
	id: int  # store id
	display_path: str  # slug or id
	href: str  # detail page link
	title: str  # display title
	rating_display: str  # e.g. "8.7"
	secondary_meta: Optional[str]  # release date / runtime caption
	poster_url: str  # CDN URL or placeholder, never empty


@dataclass
class HeroView:
	"""The spotlight banner above the carousels."""
	id: int
	display_path: str
	title: str
	overview: str
	rating_display: str
	release_date: str
	runtime_display: Optional[str]  # "142 min" or None
	secondary_meta: Optional[str]
	backdrop_url: str  # CDN URL or placeholder, never empty
	watch_href: str  # "Watch Now"
	info_href: str  # "More Info"


@dataclass
class SectionView:
	"""A visible carousel with its heading and "View All" link."""
	key: str
	label: str
	view_all_href: str
	cards: List[CardView] = field(default_factory=list)


@dataclass
class EmptyState:
	"""Message shown instead of the carousels when the catalog is empty."""
	title: str = EMPTY_STATE_TITLE
	message: str = EMPTY_STATE_MESSAGE
	action_label: str = 'Admin Login'
	action_href: str = ADMIN_LOGIN_HREF


@dataclass
class PageView:
	hero: Optional[HeroView]  # absent when nothing is rated
	sections: List[SectionView]  # visible sections only, page order
	empty_state: Optional[EmptyState]  # present iff the page is empty


def format_rating(vote_average: float) -> str:
	"""One decimal place, e.g. 8.25 -> '8.2', 9 -> '9.0'."""
	return f"{vote_average:.1f}"


def format_runtime(runtime_minutes: Optional[int]) -> Optional[str]:
	"""'136 min', or None when the runtime is unknown (missing or zero)."""
	if not runtime_minutes:
		return None
	return f"{runtime_minutes} min"


def secondary_meta(record: MovieRecord) -> Optional[str]:
	"""Release date and runtime joined for the caption line; None when both are missing."""
	parts = [p for p in (record.release_date, format_runtime(record.runtime_minutes)) if p]  # drop blanks
	return ' · '.join(parts) if parts else None


def build_card(record: MovieRecord, resolver: MediaResolver) -> CardView:
	"""Card for any carousel; the poster falls back to the 300x450 placeholder."""
	return CardView(
		id=record.id,
		display_path=resolve_link(record),  # slug or id
		href=movie_href(record),  # /movie/...
		title=record.title,
		rating_display=format_rating(record.vote_average),
		secondary_meta=secondary_meta(record),
		poster_url=image_or_placeholder(resolver, ImageKind.POSTER, record.poster_path),
	)


def build_hero(record: MovieRecord, resolver: MediaResolver) -> HeroView:
	"""Hero banner; the backdrop falls back to the 1920x1080 placeholder."""
	return HeroView(
		id=record.id,
		display_path=resolve_link(record),
		title=record.title,
		overview=record.overview,
		rating_display=format_rating(record.vote_average),
		release_date=record.release_date,
		runtime_display=format_runtime(record.runtime_minutes),
		secondary_meta=secondary_meta(record),
		backdrop_url=image_or_placeholder(resolver, ImageKind.BACKDROP, record.backdrop_path),
		watch_href=watch_href(record),  # /watch/...
		info_href=movie_href(record),  # /movie/...
	)


def build_page_view(page: CatalogPage, resolver: MediaResolver) -> PageView:
	"""Only visible sections are emitted; the empty state appears iff the page is empty."""
	sections = [
		SectionView(
			key=s.key.value,  # plain string for serialization
			label=s.label,
			view_all_href=s.view_all_href,
			cards=[build_card(m, resolver) for m in s.movies],  # order preserved
		)
		for s in page.sections
		if s.is_visible  # skip empty carousels
	]
	return PageView(
		hero=build_hero(page.hero, resolver) if page.hero else None,
		sections=sections,
		empty_state=EmptyState() if page.is_empty else None,
	)
