"""
Configuration for the catalog service.
Values come from environment variables prefixed with CATALOG_ (or a local .env file).
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	"""Application settings"""

	model_config = SettingsConfigDict(env_prefix='CATALOG_', env_file='.env', extra='ignore')

	# Movie store
	gateway_backend: str = Field(default='jsonl', description="Movie store backend: 'jsonl' or 'supabase'")
	movies_path: str = Field(default='data/movies.jsonl', description="JSON Lines catalog used by the jsonl backend")
	supabase_url: Optional[str] = Field(default=None, description="Supabase project URL")
	supabase_key: Optional[str] = Field(default=None, description="Supabase anon or service key")
	supabase_table: str = Field(default='movies', description="Table holding movie rows")
	request_timeout: float = Field(default=10.0, gt=0, description="HTTP timeout for store queries in seconds")

	# Image CDN
	image_base_url: str = Field(default='https://image.tmdb.org/t/p', description="Base URL of the image CDN")
	poster_size: str = Field(default='w500', description="CDN size bucket for posters")
	backdrop_size: str = Field(default='original', description="CDN size bucket for backdrops")

	# Logging
	log_level: str = Field(default='INFO', description="Logging level")

	@field_validator('gateway_backend')
	@classmethod
	def validate_backend(cls, v: str) -> str:
		v = v.strip().lower()
		if v not in ('jsonl', 'supabase'):
			raise ValueError(f"Unknown gateway backend: {v}")
		return v

	@field_validator('log_level')
	@classmethod
	def validate_log_level(cls, v: str) -> str:
		return v.strip().upper()


@lru_cache()
def get_settings() -> Settings:
	"""Return the process-wide settings instance."""
	return Settings()
