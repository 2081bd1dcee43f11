"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from catalog_engine.models import MovieRecord


@pytest.fixture
def make_movie():
	"""Factory for MovieRecord with sensible defaults; keyword overrides win."""
	def _make(movie_id: int, vote_average: float = 7.0, **kwargs) -> MovieRecord:
		fields = dict(
			id=movie_id,
			title=f"Movie {movie_id}",
			overview=f"Overview {movie_id}",
			vote_average=vote_average,
			vote_count=100 * movie_id,
			release_date='2020-01-01',
			created_at=f"2024-01-{movie_id:02d}T00:00:00Z",
		)
		fields.update(kwargs)
		return MovieRecord(**fields)
	return _make


@pytest.fixture
def catalog_file(tmp_path):
	"""Small JSON Lines catalog with one malformed line and one row missing a title."""
	lines = [
		'{"id": 1, "slug": "alpha", "title": "Alpha", "vote_average": 9.1, "vote_count": 50, "created_at": "2024-03-01T00:00:00Z", "runtime": 101, "poster_path": "/a.jpg"}',
		'{"id": 2, "title": "Bravo", "vote_average": 7.4, "vote_count": 900, "created_at": "2024-03-03T00:00:00Z"}',
		'not json at all',
		'{"id": 3, "title": ""}',
		'',
		'{"id": "4", "slug": "", "title": "Delta", "vote_average": "8.0", "vote_count": "300", "created_at": "2024-03-02T00:00:00Z", "genres": [{"id": 18, "name": "Drama"}]}',
	]
	path = tmp_path / 'movies.jsonl'
	path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
	return path
