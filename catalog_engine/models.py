"""
Data models for the Catalog Composition Engine.
Defines the records read from the movie store and the composed landing page structures.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Enum gives us closed sets of named values (queries, sections, image kinds)
from enum import Enum  # closed enumerations
# Import typing helpers for precise and self-documenting types
from typing import Optional, Tuple  # optional values and immutable sequences


@dataclass(frozen=True)
class MovieRecord:
	"""
	A single movie row as returned by the movie store.
	The composer only reads these; it never mutates or re-sorts them.
	"""
	id: int  # unique, stable identity
	title: str  # display title (non-empty)
	overview: str = ''  # synopsis, may be empty
	slug: Optional[str] = None  # preferred human-readable identifier when present
	poster_path: Optional[str] = None  # opaque poster asset reference (not a URL)
	backdrop_path: Optional[str] = None  # opaque backdrop asset reference (not a URL)
	release_date: str = ''  # display-only date string
	vote_average: float = 0.0  # rating, conventionally 0..10
	vote_count: int = 0  # number of votes
	runtime_minutes: Optional[int] = None  # runtime if known
	created_at: str = ''  # insertion timestamp owned by the store (ISO-8601)
	tmdb_id: Optional[int] = None  # upstream metadata id, passed through untouched
	trailer_url: Optional[str] = None  # optional trailer link, passed through untouched
	genres: Tuple[str, ...] = ()  # genre names, passed through untouched


class RankedQuery(Enum):
	"""
	The three ranked queries the landing page needs from the store.
	Each value is (order column, limit); direction is always descending.
	"""
	BY_RATING = ('vote_average', 5)
	BY_RECENCY = ('created_at', 12)
	BY_POPULARITY = ('vote_count', 12)

	@property
	def order_field(self) -> str:
		return self.value[0]

	@property
	def limit(self) -> int:
		return self.value[1]


class SectionKey(str, Enum):
	"""Carousel identifiers in the fixed order they appear on the page."""
	RECENT = 'recent'
	POPULAR = 'popular'
	TOP_RATED = 'top_rated'


class ImageKind(str, Enum):
	"""Which artwork slot an asset path belongs to."""
	POSTER = 'poster'
	BACKDROP = 'backdrop'


@dataclass(frozen=True)
class CatalogSection:
	"""
	One horizontally-scrolling list on the landing page.
	Holds record references in the store's order plus a label and "view all" target.
	"""
	key: SectionKey  # which ranking dimension this section shows
	label: str  # heading shown above the carousel
	view_all_href: str  # link to the full, sorted listing
	movies: Tuple[MovieRecord, ...] = ()  # ordered records

	@property
	def is_visible(self) -> bool:
		"""Empty sections are not rendered at all."""
		return len(self.movies) > 0


@dataclass(frozen=True)
class CatalogPage:
	"""
	The composed landing page: optional hero, the three sections, and the empty-state flag.
	"""
	hero: Optional[MovieRecord]  # spotlighted record, absent when nothing is rated
	sections: Tuple[CatalogSection, ...] = field(default_factory=tuple)  # recent, popular, top_rated
	is_empty: bool = False  # True only when recent and popular are both empty

	def section(self, key: SectionKey) -> CatalogSection:
		"""Return the section with the given key."""
		for s in self.sections:
			if s.key == key:
				return s
		raise KeyError(key)
