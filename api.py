"""
FastAPI server exposing the landing page catalog.
Endpoints:
- GET /health: basic health check
- GET /catalog: hero spotlight, ranked carousels and empty-state info for the landing page
- GET /placeholder.svg?height=..&width=..: neutral artwork for slots with no resolvable image

Startup builds the movie store gateway selected by settings (JSONL file or Supabase table)
and the image resolver used for poster/backdrop URLs.
"""

# Import standard libraries for log sink setup and timing
import sys  # stderr sink for loguru
import time  # measure startup and request latencies
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives
from fastapi.responses import Response  # raw SVG body
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for configuration, data access and composition
from catalog_engine.config import get_settings  # environment-driven settings
from catalog_engine.composer import load_catalog  # concurrent fetch + compose
from catalog_engine.gateway import GatewayError, MovieStoreGateway, build_gateway  # movie store access
from catalog_engine.media import MediaResolver, TmdbImageResolver, placeholder_svg  # artwork URLs
from catalog_engine.view_model import PageView, build_page_view  # display-ready structures

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Catalog Composition API", version="1.0.0")  # web app

# Globals that hold the collaborators and measured startup time
GATEWAY: Optional[MovieStoreGateway] = None  # movie store, set at startup
RESOLVER: MediaResolver = TmdbImageResolver()  # image CDN resolver, replaced at startup from settings
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model for a carousel card
class CardOut(BaseModel):
	id: int  # store id
	display_path: str  # slug or id used in links
	href: str  # detail page link
	title: str  # display title
	rating_display: str  # rating with one decimal
	secondary_meta: Optional[str] = None  # release date / runtime caption
	poster_url: str  # poster URL or placeholder


# Pydantic model for the hero spotlight
class HeroOut(BaseModel):
	id: int
	display_path: str
	title: str
	overview: str
	rating_display: str
	release_date: str
	runtime_display: Optional[str] = None
	secondary_meta: Optional[str] = None
	backdrop_url: str  # backdrop URL or placeholder
	watch_href: str  # "Watch Now" target
	info_href: str  # "More Info" target


# Pydantic model for one visible carousel
class SectionOut(BaseModel):
	key: str  # recent | popular | top_rated
	label: str  # heading
	view_all_href: str  # full listing link
	cards: List[CardOut]  # ordered cards


# Pydantic model for the empty-catalog message
class EmptyStateOut(BaseModel):
	title: str
	message: str
	action_label: str
	action_href: str


# Pydantic model for the complete landing page payload
class CatalogResponse(BaseModel):
	hero: Optional[HeroOut] = None  # absent when nothing is rated
	sections: List[SectionOut]  # visible sections in page order
	empty_state: Optional[EmptyStateOut] = None  # present only for an empty catalog
	elapsed_ms: float  # server-side composition time in ms


def to_response(view: PageView, elapsed_ms: float) -> CatalogResponse:
	"""Convert the engine's view model into the response schema."""
	hero = HeroOut(**vars(view.hero)) if view.hero else None  # dataclass -> schema
	sections = [
		SectionOut(
			key=s.key,
			label=s.label,
			view_all_href=s.view_all_href,
			cards=[CardOut(**vars(c)) for c in s.cards],
		)
		for s in view.sections
	]
	empty = EmptyStateOut(**vars(view.empty_state)) if view.empty_state else None
	return CatalogResponse(hero=hero, sections=sections, empty_state=empty, elapsed_ms=round(elapsed_ms, 2))


# FastAPI startup hook to initialize collaborators once
@app.on_event("startup")
async def startup_event():
	"""Configure logging, then build the gateway and resolver from settings."""
	global GATEWAY, RESOLVER, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	settings = get_settings()  # read env/.env once
	logger.remove()  # drop the default sink so the configured level applies
	logger.add(sys.stderr, level=settings.log_level)  # console sink
	logger.info(f"[API] Startup: backend={settings.gateway_backend}")  # log intent

	GATEWAY = build_gateway(settings)  # JSONL or Supabase
	RESOLVER = TmdbImageResolver(
		base_url=settings.image_base_url,
		poster_size=settings.poster_size,
		backdrop_size=settings.backdrop_size,
	)

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s.")  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"gateway_ready": GATEWAY is not None,  # True if gateway initialized
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


# Landing page endpoint
@app.get("/catalog", response_model=CatalogResponse)
async def catalog():
	"""Compose the landing page from the three ranked store queries."""
	if GATEWAY is None:  # gateway must be ready to serve
		logger.warning("[API] Catalog requested but gateway not initialized")  # guard log
		raise HTTPException(status_code=503, detail="Catalog is not ready")

	start = time.time()  # start timer
	try:
		page = await load_catalog(GATEWAY)  # all-or-nothing composition
	except GatewayError as e:
		logger.error(f"[API] /catalog upstream failure: {e}")  # keep details in logs only
		raise HTTPException(status_code=502, detail="Catalog is temporarily unavailable") from e

	view = build_page_view(page, RESOLVER)  # links, ratings, artwork fallback
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(
		f"[API] /catalog served hero={'yes' if view.hero else 'no'} sections={len(view.sections)} empty={view.empty_state is not None} in {elapsed_ms:.2f} ms"
	)
	return to_response(view, elapsed_ms)


# Placeholder artwork referenced by cards and hero banners without a resolvable image
@app.get("/placeholder.svg")
async def placeholder(height: int = Query(450, ge=1, le=4096), width: int = Query(300, ge=1, le=4096)):
	"""Serve a plain SVG of the requested size."""
	return Response(content=placeholder_svg(width, height), media_type="image/svg+xml")
