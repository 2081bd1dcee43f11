"""
Movie store gateways.
Answers the three ranked queries the landing page needs, from memory or from a Supabase (PostgREST) table.
"""

from typing import List, Optional

import requests  # HTTP client for the PostgREST endpoint

from loguru import logger

from .config import Settings
from .data_loader import DataLoader
from .models import MovieRecord, RankedQuery


class GatewayError(RuntimeError):
	"""Raised when the movie store cannot answer a query."""


class MovieStoreGateway:
	"""
	Base contract: fetch_top returns at most query.limit records ordered by
	query.order_field descending. Zero matches is a valid, non-error result.
	"""

	def fetch_top(self, query: RankedQuery) -> List[MovieRecord]:
		raise NotImplementedError


class InMemoryMovieGateway(MovieStoreGateway):
	"""
	Serves ranked queries from a list of records held in memory.
	The sort is stable, so records with equal keys keep their insertion order.
	"""

	def __init__(self, movies: List[MovieRecord]):
		self.movies = list(movies)
		logger.debug(f"[Gateway] In-memory store ready with {len(self.movies)} movies")

	def fetch_top(self, query: RankedQuery) -> List[MovieRecord]:
		ranked = sorted(self.movies, key=lambda m: getattr(m, query.order_field), reverse=True)
		result = ranked[:query.limit]
		logger.debug(f"[Gateway] {query.name}: {len(result)} of {len(self.movies)} movies")
		return result


class SupabaseMovieGateway(MovieStoreGateway):
	"""
	Queries a Supabase table through its PostgREST interface:
	GET {url}/rest/v1/{table}?select=*&order=<column>.desc&limit=<n>
	"""

	def __init__(self, url: str, api_key: str, table: str = 'movies', timeout: float = 10.0, loader: Optional[DataLoader] = None):
		if not url or not api_key:
			raise ValueError("Supabase URL and key are required")
		self.base_url = url.rstrip('/')
		self.api_key = api_key
		self.table = table
		self.timeout = timeout
		self.loader = loader or DataLoader()

	@property
	def endpoint(self) -> str:
		return f"{self.base_url}/rest/v1/{self.table}"

	def _headers(self) -> dict:
		return {
			'apikey': self.api_key,
			'Authorization': f"Bearer {self.api_key}",
			'Accept': 'application/json',
		}

	def fetch_top(self, query: RankedQuery) -> List[MovieRecord]:
		params = {
			'select': '*',
			'order': f"{query.order_field}.desc",
			'limit': str(query.limit),
		}
		logger.debug(f"[Gateway] {query.name}: GET {self.endpoint} params={params}")
		try:
			resp = requests.get(self.endpoint, params=params, headers=self._headers(), timeout=self.timeout)
			resp.raise_for_status()
			rows = resp.json()
		except requests.RequestException as e:
			raise GatewayError(f"{query.name} query failed: {e}") from e
		except ValueError as e:  # body was not JSON
			raise GatewayError(f"{query.name} returned an unreadable body: {e}") from e

		if not isinstance(rows, list):
			raise GatewayError(f"{query.name} returned {type(rows).__name__}, expected a list of rows")

		movies = self.loader.parse_rows(rows)
		logger.debug(f"[Gateway] {query.name}: {len(movies)} movies")
		return movies[:query.limit]


def build_gateway(settings: Settings) -> MovieStoreGateway:
	"""Create the gateway selected by settings.gateway_backend."""
	if settings.gateway_backend == 'supabase':
		logger.info(f"[Gateway] Using Supabase table '{settings.supabase_table}'")
		return SupabaseMovieGateway(
			settings.supabase_url or '',
			settings.supabase_key or '',
			table=settings.supabase_table,
			timeout=settings.request_timeout,
		)
	if settings.gateway_backend == 'jsonl':
		logger.info(f"[Gateway] Using JSONL catalog '{settings.movies_path}'")
		movies = DataLoader().load_movies_from_jsonl(settings.movies_path)
		return InMemoryMovieGateway(movies)
	raise ValueError(f"Unknown gateway backend: {settings.gateway_backend}")
