"""
Smoke test for the Streamlit preview page in local mode, using Streamlit's headless AppTest runner.
"""

from pathlib import Path

import requests
from streamlit.testing.v1 import AppTest

from catalog_engine.config import get_settings

ROOT = Path(__file__).resolve().parents[1]


def test_local_preview_renders_catalog(monkeypatch):
	def unreachable(*args, **kwargs):
		raise requests.ConnectionError('no api running')

	monkeypatch.setattr(requests, 'get', unreachable)  # health probe fails -> local mode
	monkeypatch.chdir(ROOT)
	monkeypatch.setenv('CATALOG_GATEWAY_BACKEND', 'jsonl')
	monkeypatch.setenv('CATALOG_MOVIES_PATH', str(ROOT / 'data' / 'movies.jsonl'))
	get_settings.cache_clear()
	try:
		at = AppTest.from_file(str(ROOT / 'streamlit_app.py'), default_timeout=30).run()
	finally:
		get_settings.cache_clear()

	assert not at.exception
	assert "The Shawshank Redemption" in [h.value for h in at.header]  # hero title
	assert [s.value for s in at.subheader] == ['Recently Added', 'Popular Movies', 'Top Rated']
