"""
Data loading module.
Turns raw movie store rows (dicts from JSON Lines files or PostgREST responses) into MovieRecord objects.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON lines
from typing import Any, Dict, List, Optional  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our MovieRecord data class used across the project
from .models import MovieRecord  # structured movie record

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Handles loading and parsing of movie store rows.
	"""

	def load_movies_from_jsonl(self, filepath: str) -> List[MovieRecord]:
		"""
		Load movies from a JSON Lines (JSONL) file where each line is one JSON object.
		Returns a list of MovieRecord objects in file order.
		"""
		movies = []  # accumulator for parsed records
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		# Read line-by-line so large catalogs never need to fit in one string
		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):  # keep track of line number for diagnostics
				if not line.strip():  # tolerate blank lines
					continue
				try:
					data = json.loads(line.strip())  # parse JSON object per line
				except json.JSONDecodeError as e:
					logger.warning(f"[DataLoader] Skipping invalid JSON at line {line_num}: {e}")  # malformed line
					continue  # move on
				movie = self.parse_row(data)  # convert dict -> MovieRecord
				if movie is None:
					logger.warning(f"[DataLoader] Skipping unusable movie row at line {line_num}")
					continue
				movies.append(movie)  # collect

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies  # return list

	def parse_rows(self, rows: List[Dict[str, Any]]) -> List[MovieRecord]:
		"""Parse a batch of rows, dropping any that cannot form a record. Order is preserved."""
		movies = []
		for row in rows:
			movie = self.parse_row(row)
			if movie is None:
				row_id = row.get('id') if isinstance(row, dict) else None
				logger.warning(f"[DataLoader] Skipping unusable movie row: id={row_id}")
				continue
			movies.append(movie)
		return movies

	def parse_row(self, data: Dict[str, Any]) -> Optional[MovieRecord]:
		"""
		Convert a raw dictionary into a MovieRecord, or None when the row lacks an id or title.
		Missing optional fields get safe defaults; nothing here ever raises for absent data.
		"""
		if not isinstance(data, dict):
			return None

		movie_id = self._parse_int(data.get('id'))  # identity is mandatory
		title = str(data.get('title') or '').strip()  # title is mandatory
		if movie_id is None or not title:
			return None

		slug = data.get('slug')
		if not isinstance(slug, str) or not slug.strip():  # empty slugs count as absent
			slug = None
		else:
			slug = slug.strip()

		return MovieRecord(
			id=movie_id,
			title=title,
			overview=str(data.get('overview') or ''),  # display text is always a str
			slug=slug,
			poster_path=self._parse_optional_str(data.get('poster_path')),  # '' -> None
			backdrop_path=self._parse_optional_str(data.get('backdrop_path')),  # '' -> None
			release_date=str(data.get('release_date') or ''),  # 1999 -> '1999'
			vote_average=self._parse_float(data.get('vote_average')),
			vote_count=self._parse_int(data.get('vote_count')) or 0,
			runtime_minutes=self._parse_int(data.get('runtime')),
			created_at=str(data.get('created_at') or ''),
			tmdb_id=self._parse_int(data.get('tmdb_id')),
			trailer_url=self._parse_optional_str(data.get('trailer_url')),
			genres=tuple(self._parse_genres(data.get('genres'))),
		)

	def _parse_int(self, value) -> Optional[int]:
		"""Parse an int, returning None for missing or garbage values."""
		if value is None or value == '':
			return None
		try:
			return int(value)
		except (TypeError, ValueError):
			return None

	def _parse_float(self, value) -> float:
		"""Parse a float, defaulting to 0.0."""
		if value is None or value == '':
			return 0.0
		try:
			return float(value)
		except (TypeError, ValueError):
			return 0.0

	def _parse_optional_str(self, value) -> Optional[str]:
		"""Stringify a value, treating None and blank text as absent."""
		if value is None:
			return None
		text = str(value).strip()
		return text or None

	def _parse_genres(self, value) -> List[str]:
		"""
		Normalize genres that may arrive as None, a comma-separated string,
		a list of names, or a list of {"id", "name"} objects.
		"""
		if value is None:  # missing field
			return []
		if isinstance(value, str):  # comma-separated string
			return [item.strip() for item in value.split(',') if item.strip()]
		if isinstance(value, list):
			names = []
			for item in value:
				if isinstance(item, dict):  # TMDB-style genre objects
					item = item.get('name')
				if item:
					names.append(str(item).strip())
			return names
		return []  # any other type becomes empty
