"""
Unit tests for the view model: navigation cards, hero links, rating formatting and empty state.
"""

from catalog_engine.composer import compose_catalog
from catalog_engine.media import TmdbImageResolver
from catalog_engine.view_model import build_page_view, format_rating, secondary_meta


def test_format_rating_one_decimal():
	assert format_rating(9) == '9.0'
	assert format_rating(8.26) == '8.3'
	assert format_rating(0.0) == '0.0'


def test_secondary_meta(make_movie):
	assert secondary_meta(make_movie(1, release_date='1999-03-30', runtime_minutes=136)) == '1999-03-30 · 136 min'
	assert secondary_meta(make_movie(1, release_date='1999-03-30')) == '1999-03-30'
	assert secondary_meta(make_movie(1, release_date='', runtime_minutes=90)) == '90 min'
	assert secondary_meta(make_movie(1, release_date='', runtime_minutes=None)) is None


def test_hero_view_links_and_artwork(make_movie):
	hero = make_movie(42, 9.5, slug='the-matrix', backdrop_path='/bd.jpg', runtime_minutes=136)
	view = build_page_view(compose_catalog([hero], [hero], []), TmdbImageResolver())

	assert view.hero.display_path == 'the-matrix'
	assert view.hero.watch_href == '/watch/the-matrix'
	assert view.hero.info_href == '/movie/the-matrix'
	assert view.hero.backdrop_url == 'https://image.tmdb.org/t/p/original/bd.jpg'
	assert view.hero.rating_display == '9.5'
	assert view.hero.runtime_display == '136 min'


def test_hero_without_backdrop_gets_placeholder(make_movie):
	hero = make_movie(7, 9.5)
	view = build_page_view(compose_catalog([hero], [], []), TmdbImageResolver())

	assert view.hero.display_path == '7'
	assert view.hero.watch_href == '/watch/7'
	assert view.hero.backdrop_url == '/placeholder.svg?height=1080&width=1920'


def test_cards_resolve_links_in_every_section(make_movie):
	slugged = make_movie(42, 9.0, slug='the-matrix', poster_path='/p.jpg')
	plain = make_movie(7, 8.0)
	view = build_page_view(compose_catalog([slugged, plain], [plain, slugged], [slugged]), TmdbImageResolver())

	by_key = {s.key: s for s in view.sections}
	assert [c.display_path for c in by_key['recent'].cards] == ['7', 'the-matrix']
	assert [c.href for c in by_key['popular'].cards] == ['/movie/the-matrix']
	assert [c.display_path for c in by_key['top_rated'].cards] == ['7']


def test_card_without_poster_gets_placeholder(make_movie):
	view = build_page_view(compose_catalog([], [make_movie(1, poster_path=None)], []), TmdbImageResolver())

	card = view.sections[0].cards[0]
	assert card.poster_url == '/placeholder.svg?height=450&width=300'
	assert card.poster_url != ''


def test_only_visible_sections_emitted(make_movie):
	view = build_page_view(compose_catalog([make_movie(1, 9.0)], [], [make_movie(2)]), TmdbImageResolver())

	assert [s.key for s in view.sections] == ['popular']
	assert view.empty_state is None


def test_empty_state(make_movie):
	view = build_page_view(compose_catalog([make_movie(1, 9.0), make_movie(2, 8.0)], [], []), TmdbImageResolver())

	assert view.hero is not None
	assert [s.key for s in view.sections] == ['top_rated']
	assert view.empty_state is not None
	assert view.empty_state.title == 'No Movies Available'
	assert view.empty_state.action_href == '/admin/login'


def test_completely_empty_page():
	view = build_page_view(compose_catalog([], [], []), TmdbImageResolver())

	assert view.hero is None
	assert view.sections == []
	assert view.empty_state is not None
