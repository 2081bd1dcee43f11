"""
API tests for the /health, /catalog and /placeholder.svg endpoints.
The gateway global is swapped per test; startup hooks are not run.
"""

import pytest
from fastapi.testclient import TestClient

import api
from catalog_engine.data_loader import DataLoader
from catalog_engine.gateway import GatewayError, InMemoryMovieGateway, MovieStoreGateway
from catalog_engine.media import TmdbImageResolver


@pytest.fixture
def client(monkeypatch):
	monkeypatch.setattr(api, 'RESOLVER', TmdbImageResolver())
	return TestClient(app=api.app)


def use_gateway(monkeypatch, gateway):
	monkeypatch.setattr(api, 'GATEWAY', gateway)


def test_health(client, monkeypatch):
	use_gateway(monkeypatch, InMemoryMovieGateway([]))
	resp = client.get('/health')

	assert resp.status_code == 200
	body = resp.json()
	assert body['status'] == 'ok'
	assert body['gateway_ready'] is True


def test_catalog_not_ready(client, monkeypatch):
	use_gateway(monkeypatch, None)
	assert client.get('/catalog').status_code == 503


def test_catalog_full_page(client, make_movie, monkeypatch):
	movies = [
		make_movie(1, 9.5, slug='the-matrix', backdrop_path='/m.jpg', poster_path='/mp.jpg', runtime_minutes=136),
		make_movie(2, 9.0, vote_count=5000),
		make_movie(3, 8.0),
	]
	use_gateway(monkeypatch, InMemoryMovieGateway(movies))
	resp = client.get('/catalog')

	assert resp.status_code == 200
	body = resp.json()
	assert body['hero']['title'] == 'Movie 1'
	assert body['hero']['watch_href'] == '/watch/the-matrix'
	assert body['hero']['info_href'] == '/movie/the-matrix'
	assert body['hero']['backdrop_url'] == 'https://image.tmdb.org/t/p/original/m.jpg'
	assert body['hero']['rating_display'] == '9.5'
	assert [s['key'] for s in body['sections']] == ['recent', 'popular', 'top_rated']
	top = body['sections'][2]
	assert top['label'] == 'Top Rated'
	assert top['view_all_href'] == '/movies?sort=rating'
	assert [c['display_path'] for c in top['cards']] == ['2', '3']
	assert top['cards'][0]['poster_url'] == '/placeholder.svg?height=450&width=300'
	assert body['empty_state'] is None
	assert body['elapsed_ms'] >= 0


def test_catalog_empty_store(client, monkeypatch):
	use_gateway(monkeypatch, InMemoryMovieGateway([]))
	body = client.get('/catalog').json()

	assert body['hero'] is None
	assert body['sections'] == []
	assert body['empty_state']['title'] == 'No Movies Available'
	assert body['empty_state']['action_href'] == '/admin/login'


def test_catalog_numeric_release_date_row(client, monkeypatch):
	movie = DataLoader().parse_row({'id': 1, 'title': 'A', 'release_date': 1999, 'runtime': 120, 'vote_average': 8.0})
	use_gateway(monkeypatch, InMemoryMovieGateway([movie]))
	resp = client.get('/catalog')

	assert resp.status_code == 200
	body = resp.json()
	assert body['hero']['release_date'] == '1999'
	assert body['hero']['secondary_meta'] == '1999 · 120 min'
	assert body['sections'][0]['cards'][0]['secondary_meta'] == '1999 · 120 min'


def test_catalog_upstream_failure_is_generic_502(client, monkeypatch):
	class DownGateway(MovieStoreGateway):
		def fetch_top(self, query):
			raise GatewayError('connection refused by db-internal:5432')

	use_gateway(monkeypatch, DownGateway())
	resp = client.get('/catalog')

	assert resp.status_code == 502
	assert resp.json() == {'detail': 'Catalog is temporarily unavailable'}


def test_placeholder_svg(client):
	resp = client.get('/placeholder.svg', params={'height': 1080, 'width': 1920})

	assert resp.status_code == 200
	assert resp.headers['content-type'].startswith('image/svg+xml')
	assert 'width="1920"' in resp.text
	assert 'height="1080"' in resp.text
