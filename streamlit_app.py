"""
Streamlit preview of the landing page.
Calls the local FastAPI server at http://localhost:8000 to fetch the composed catalog,
or composes it locally from the configured movie store like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# Async runner for the local composition path
import asyncio  # run load_catalog outside an event loop
# Convert view-model dataclasses into plain dicts shaped like the API payload
from dataclasses import asdict  # dataclass -> dict
# Typing to make function signatures clearer
from typing import Optional  # indicates values can be None
from urllib.parse import parse_qs, urlparse  # read placeholder size tags

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives

# Local engine imports for fallback/local mode (when API isn't used)
from catalog_engine.config import get_settings  # environment-driven settings
from catalog_engine.composer import load_catalog  # fetch + compose
from catalog_engine.gateway import MovieStoreGateway, build_gateway  # movie store access
from catalog_engine.media import TmdbImageResolver, placeholder_svg  # artwork
from catalog_engine.view_model import build_page_view  # display-ready structures

# Default URL where the FastAPI server is expected to run locally
DEFAULT_API_URL = "http://localhost:8000"  # default API base URL
CARDS_PER_ROW = 6  # carousel width in columns

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="StreamFlix", layout="wide")  # wide layout


# Cache the gateway so the catalog file is read once per session
@st.cache_resource(show_spinner=True)
def init_local_gateway() -> Optional[MovieStoreGateway]:
	"""Create the movie store gateway from settings."""
	try:
		return build_gateway(get_settings())
	except Exception as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to initialize local movie store: {e}")
		return None  # signal failure


def local_payload(gateway: MovieStoreGateway) -> dict:
	"""Compose in-process and return a dict shaped like the /catalog response."""
	settings = get_settings()
	resolver = TmdbImageResolver(settings.image_base_url, settings.poster_size, settings.backdrop_size)
	page = asyncio.run(load_catalog(gateway))
	view = build_page_view(page, resolver)
	return asdict(view)


def show_image(url: str, **kwargs):
	"""Render a resolved URL, or draw the placeholder locally for relative placeholder links."""
	if url.startswith('/placeholder.svg'):
		qs = parse_qs(urlparse(url).query)
		width = int(qs.get('width', ['300'])[0])
		height = int(qs.get('height', ['450'])[0])
		st.image(placeholder_svg(width, height), **kwargs)
	else:
		st.image(url, **kwargs)


def render_hero(hero: dict):
	show_image(hero['backdrop_url'], width="stretch")
	st.header(hero['title'])
	st.write(hero['overview'])
	meta = f"⭐ {hero['rating_display']}"
	if hero.get('secondary_meta'):
		meta += f"  |  {hero['secondary_meta']}"
	st.caption(meta)
	st.markdown(f"[▶ Watch Now]({hero['watch_href']})  ·  [ℹ More Info]({hero['info_href']})")


def render_section(section: dict):
	head, link = st.columns([5, 1])
	head.subheader(section['label'])
	link.markdown(f"[View All]({section['view_all_href']})")
	cards = section['cards']
	for row_start in range(0, len(cards), CARDS_PER_ROW):
		cols = st.columns(CARDS_PER_ROW)
		for col, card in zip(cols, cards[row_start:row_start + CARDS_PER_ROW]):
			with col:
				show_image(card['poster_url'], width="stretch")
				st.markdown(f"**[{card['title']}]({card['href']})**")
				st.caption(f"⭐ {card['rating_display']}")


# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", DEFAULT_API_URL)  # where the API lives
	# Toggle to force local mode; if API health probe fails we also fall back to local
	use_local = st.toggle("Compose locally", value=False, help="If enabled or API is unreachable, the page is composed in this process.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will compose locally.")  # inform user

# Load the page payload from whichever source is available
payload = None  # filled below
try:
	if use_local or not api_available:
		gateway = init_local_gateway()  # build or reuse gateway
		if gateway is not None:
			payload = local_payload(gateway)
	else:
		resp = requests.get(f"{api_url}/catalog", timeout=30)
		resp.raise_for_status()  # raise error if server responded with an error code
		payload = resp.json()
except Exception as e:
	st.error(f"Failed to load the catalog: {e}")  # generic failed-page state

if payload is not None:
	if payload.get('hero'):
		render_hero(payload['hero'])
	for section in payload['sections']:
		render_section(section)
	empty = payload.get('empty_state')
	if empty:
		st.subheader(empty['title'])
		st.write(empty['message'])
		st.markdown(f"[{empty['action_label']}]({empty['action_href']})")
