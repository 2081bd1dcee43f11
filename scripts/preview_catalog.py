"""
Preview the composed landing page from a JSON Lines catalog.

This script:
1) Loads movies from data/movies.jsonl (or the path given as the first argument)
2) Runs the three ranked queries against an in-memory store
3) Composes the page and builds the view model
4) Logs the hero, each visible section, and the empty state

Usage:
    python -m scripts.preview_catalog [path/to/movies.jsonl]
"""

import asyncio  # drive the async composer
import sys  # optional path argument
import time  # measure step timings
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from catalog_engine.composer import load_catalog  # concurrent fetch + compose
from catalog_engine.data_loader import DataLoader  # data ingestion
from catalog_engine.gateway import InMemoryMovieGateway  # ranked queries over a list
from catalog_engine.media import TmdbImageResolver  # artwork URLs
from catalog_engine.view_model import build_page_view  # display-ready structures


def main():
	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Landing Page Preview")
	logger.info("=" * 60)

	# Resolve project root and input path
	root = Path(__file__).resolve().parents[1]  # project root
	data_path = Path(sys.argv[1]) if len(sys.argv) > 1 else root / 'data' / 'movies.jsonl'  # input dataset

	# 1) Load data
	logger.info("[1/3] Loading movies...")
	movies = DataLoader().load_movies_from_jsonl(str(data_path))  # read dataset
	logger.info(f"[OK] Loaded {len(movies)} movies")  # confirm count

	# 2) Compose
	logger.info("[2/3] Composing catalog...")
	t0 = time.time()  # start timer
	page = asyncio.run(load_catalog(InMemoryMovieGateway(movies)))  # three queries + compose
	view = build_page_view(page, TmdbImageResolver())  # links, ratings, artwork
	logger.info(f"[OK] Composed in {(time.time() - t0) * 1000:.2f} ms")  # report

	# 3) Report
	logger.info("[3/3] Page contents:")
	if view.hero:
		logger.info(f"  Hero: {view.hero.title} [{view.hero.rating_display}] -> {view.hero.watch_href}")
	else:
		logger.info("  Hero: (none)")
	for section in view.sections:
		logger.info(f"  {section.label} ({len(section.cards)}) -> {section.view_all_href}")
		for i, card in enumerate(section.cards, 1):
			logger.info(f"    {i}. {card.title} [{card.rating_display}] {card.href}")
	if view.empty_state:
		logger.info(f"  {view.empty_state.title}: {view.empty_state.message}")

	logger.info("=" * 60)


if __name__ == '__main__':
	main()  # invoke preview
