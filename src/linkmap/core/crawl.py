# LinkMap — Core crawler (level-synchronized BFS over one origin)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, Iterator, List, Optional, Tuple

from .extract import extract_links
from .frontier import Frontier
from ..utils.urls import filter_links, origin_of


logger = logging.getLogger(__name__)

FetchFn = Callable[[str], bytes]
ExtractFn = Callable[[bytes], List[str]]


class CrawlOptions:
	def __init__(self, max_depth: int = 10, workers: int = 1):
		self.max_depth = max(0, int(max_depth))
		self.workers = max(1, int(workers))


class CrawlResult:
	def __init__(self, seed: str) -> None:
		self.seed = seed
		self.pages: List[str] = []
		self.levels = 0
		self.fetches = 0


class Crawler:
	"""Depth-limited BFS crawler confined to the seed's origin.

	Any fetch or extraction error aborts the traversal; there is no partial
	result.
	"""

	def __init__(self, fetch: FetchFn, extract: Optional[ExtractFn] = None) -> None:
		self.fetch = fetch
		self.extract = extract or extract_links

	def expand(self, url: str) -> List[str]:
		"""Fetch url and return its in-scope links."""
		origin = origin_of(url)
		content = self.fetch(url)
		links = filter_links(origin, self.extract(content))
		logger.debug("%s -> %d in-scope links", url, len(links))
		return links

	def _expand_level(self, batch: List[str], workers: int) -> Iterator[Tuple[str, List[str]]]:
		if workers == 1 or len(batch) <= 1:
			for url in batch:
				yield url, self.expand(url)
			return
		with ThreadPoolExecutor(max_workers=min(workers, len(batch))) as pool:
			futures = {pool.submit(self.expand, url): url for url in batch}
			done, pending = wait(futures, return_when=FIRST_EXCEPTION)
			for fut in pending:
				fut.cancel()
			for fut in done:
				exc = fut.exception()
				if exc is not None:
					raise exc
			# every future completed without error; keep claim order
			for fut, url in futures.items():
				yield url, fut.result()

	def crawl(self, seed: str, options: CrawlOptions) -> CrawlResult:
		res = CrawlResult(seed)
		origin_of(seed)  # reject malformed seeds before any fetch
		frontier = Frontier(seed)
		while True:
			batch = frontier.claim()
			logger.info("Depth %d: %d page(s) to fetch for %s", frontier.depth, len(batch), seed)
			for _, links in self._expand_level(batch, options.workers):
				frontier.push(links)
			res.fetches += len(batch)
			res.levels = frontier.depth + 1
			if not frontier.advance(options.max_depth):
				break
		res.pages = list(frontier.visited)
		logger.info("Crawled %s: %d page(s) over %d level(s)", seed, len(res.pages), res.levels)
		return res
