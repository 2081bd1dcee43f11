"""
Media URL resolution.
Maps opaque poster/backdrop paths to CDN URLs and guarantees a placeholder when no URL can be produced.
"""

# Typing helpers for the resolver contract
from typing import Dict, Optional, Tuple  # type hints

# Console logging
from loguru import logger  # console logger

# Artwork slot enumeration
from .models import ImageKind  # poster | backdrop

# Logical (width, height) of the placeholder for each artwork slot
PLACEHOLDER_SIZES: Dict[ImageKind, Tuple[int, int]] = {
	ImageKind.POSTER: (300, 450),
	ImageKind.BACKDROP: (1920, 1080),
}


class MediaResolver:
	"""Contract: resolve_image returns an absolute URL or None when there is no asset."""

	def resolve_image(self, kind: ImageKind, path: Optional[str]) -> Optional[str]:
		raise NotImplementedError  # implemented by concrete resolvers


class TmdbImageResolver(MediaResolver):
	"""
	Builds TMDB image CDN URLs of the form {base_url}/{size}{path},
	e.g. https://image.tmdb.org/t/p/w500/abc.jpg
	"""

	def __init__(self, base_url: str = 'https://image.tmdb.org/t/p', poster_size: str = 'w500', backdrop_size: str = 'original'):
		self.base_url = base_url.rstrip('/')  # avoid double slashes
		# CDN size bucket per artwork slot
		self.sizes = {
			ImageKind.POSTER: poster_size,
			ImageKind.BACKDROP: backdrop_size,
		}

	def resolve_image(self, kind: ImageKind, path: Optional[str]) -> Optional[str]:
		"""Return the CDN URL for a path, or None for a missing or blank path."""
		if not path or not path.strip():  # no asset
			return None
		path = path.strip()  # tolerate stray whitespace
		if not path.startswith('/'):  # TMDB paths carry a leading slash
			path = '/' + path
		return f"{self.base_url}/{self.sizes[ImageKind(kind)]}{path}"


def placeholder_url(kind: ImageKind) -> str:
	"""Deterministic placeholder for an empty artwork slot."""
	width, height = PLACEHOLDER_SIZES[ImageKind(kind)]  # fixed logical size tag
	return f"/placeholder.svg?height={height}&width={width}"


def placeholder_svg(width: int, height: int) -> str:
	"""Neutral grey SVG of the requested size, served for placeholder URLs."""
	return (
		f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">'
		f'<rect width="{width}" height="{height}" fill="#27272a"/>'
		'</svg>'
	)


def image_or_placeholder(resolver: MediaResolver, kind: ImageKind, path: Optional[str]) -> str:
	"""
	Resolve an asset path, falling back to the placeholder when the path is missing,
	the resolver yields nothing, or the resolver itself fails.
	"""
	if not path:  # nothing to resolve
		return placeholder_url(kind)
	try:
		url = resolver.resolve_image(kind, path)  # may be None
	except Exception as e:  # a broken resolver never fails the page
		logger.warning(f"[Media] Resolver failed for {ImageKind(kind).value} '{path}': {e}")
		url = None
	return url or placeholder_url(kind)  # never an empty slot
