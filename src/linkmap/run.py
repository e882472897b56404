# LinkMap — Run orchestration (seed list -> crawl -> sitemap files)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import List, Optional

from .config import Settings
from .core.crawl import Crawler, CrawlOptions
from .core.fetch import make_fetcher
from .core.seeds import read_seeds, seed_list_path
from .core.sitemap import build_sitemap
from .storage.writers import SitemapWriter


logger = logging.getLogger(__name__)


def build_sitemaps(
	settings: Settings,
	crawler: Optional[Crawler] = None,
	writer: Optional[SitemapWriter] = None,
) -> List[str]:
	"""Crawl every seed in order and write its sitemap; returns written paths.

	The first error aborts the whole run, later seeds are not attempted.
	"""
	path = seed_list_path(settings.file_path, settings.home_dir)
	seeds = read_seeds(path)
	logger.info("Loaded %d seed(s) from %s", len(seeds), path)
	if crawler is None:
		fetcher = make_fetcher(user_agent=settings.user_agent, timeout=settings.timeout)
		crawler = Crawler(fetcher.fetch)
	writer = writer or SitemapWriter(settings.output_dir)
	opt = CrawlOptions(max_depth=settings.max_depth, workers=settings.workers)

	written: List[str] = []
	for seed in seeds:
		res = crawler.crawl(seed, opt)
		doc = build_sitemap(res.pages)
		written.append(writer.write(seed, doc))
	return written
