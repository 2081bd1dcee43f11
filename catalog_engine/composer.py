"""
Catalog composer.
Turns the three ranked slices from the movie store into the landing page structure:
hero spotlight, "Recently Added", "Popular Movies" and "Top Rated" carousels, and the empty-state flag.
"""

import asyncio  # run the independent store queries concurrently
from typing import Optional, Sequence  # type hints

# Console logging
from loguru import logger  # console logger

# Project modules for store access, links and page structures
from .gateway import MovieStoreGateway  # ranked query contract
from .links import view_all_href  # "View All" targets
from .models import CatalogPage, CatalogSection, MovieRecord, RankedQuery, SectionKey  # composed structures

# (label, view-all sort key) per section, in page order
SECTION_META = {
	SectionKey.RECENT: ('Recently Added', 'recent'),
	SectionKey.POPULAR: ('Popular Movies', 'popular'),
	SectionKey.TOP_RATED: ('Top Rated', 'rating'),
}


def _section(key: SectionKey, movies: Sequence[MovieRecord]) -> CatalogSection:
	"""Build one section, freezing the slice into a tuple."""
	label, sort_key = SECTION_META[key]  # heading and listing sort
	return CatalogSection(key=key, label=label, view_all_href=view_all_href(sort_key), movies=tuple(movies))


def select_hero(featured: Sequence[MovieRecord]) -> Optional[MovieRecord]:
	"""
	The hero is the first featured record. Records tied on vote_average keep the
	order the store returned them in; no secondary sort is applied.
	"""
	return featured[0] if featured else None  # no hero for an empty slice


def compose_catalog(
	featured: Sequence[MovieRecord],
	recent: Sequence[MovieRecord],
	popular: Sequence[MovieRecord],
) -> CatalogPage:
	"""
	Build the landing page from the three slices.

	- hero: featured[0], absent when featured is empty
	- top rated: featured[1:], so the hero never appears twice in the rating dimension
	- recent / popular: verbatim, capped; the same movie may appear in both
	- is_empty: only when recent and popular are both empty (featured is ignored)
	"""
	# Cap each slice in case a store returns more than asked for
	featured = list(featured)[:RankedQuery.BY_RATING.limit]
	recent = list(recent)[:RankedQuery.BY_RECENCY.limit]
	popular = list(popular)[:RankedQuery.BY_POPULARITY.limit]

	hero = select_hero(featured)
	top_rated = featured[1:]  # everything after the hero, order kept

	page = CatalogPage(
		hero=hero,
		sections=(
			_section(SectionKey.RECENT, recent),
			_section(SectionKey.POPULAR, popular),
			_section(SectionKey.TOP_RATED, top_rated),
		),
		is_empty=not recent and not popular,  # featured never affects this
	)
	logger.debug(
		f"[Composer] hero={hero.id if hero else None} | recent={len(recent)} popular={len(popular)} top_rated={len(top_rated)} | empty={page.is_empty}"
	)
	return page


async def load_catalog(gateway: MovieStoreGateway) -> CatalogPage:
	"""
	Fetch the three slices concurrently and compose them once all have arrived.
	Any query failure propagates unchanged; there is no partial page.
	"""
	# Each blocking query runs in a worker thread; gather is the join barrier
	featured, recent, popular = await asyncio.gather(
		asyncio.to_thread(gateway.fetch_top, RankedQuery.BY_RATING),
		asyncio.to_thread(gateway.fetch_top, RankedQuery.BY_RECENCY),
		asyncio.to_thread(gateway.fetch_top, RankedQuery.BY_POPULARITY),
	)
	return compose_catalog(featured, recent, popular)
