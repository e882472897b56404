import threading

import pytest
from linkmap.core.crawl import Crawler, CrawlOptions
from linkmap.core.frontier import Frontier
from linkmap.errors import FetchError, ParseError


class FakeWeb:
	"""Pages keyed by URL; each page body is a list of hrefs."""

	def __init__(self, pages, fail=()):
		self.pages = pages
		self.fail = set(fail)
		self.calls = []
		self._lock = threading.Lock()

	def fetch(self, url):
		with self._lock:
			self.calls.append(url)
		if url in self.fail:
			raise FetchError(url, "connection refused")
		links = self.pages.get(url, [])
		return "".join(f'<a href="{h}">x</a>' for h in links).encode()


SITE = {
	"https://h.com": ["/a", "/b", "https://other.com/z", "https://h.com"],
	"https://h.com/a": ["/b", "/a/1", "/"],
	"https://h.com/b": ["/a", "/b/1"],
	"https://h.com/a/1": ["/a/1/deep"],
	"https://h.com/b/1": [],
	"https://h.com/a/1/deep": [],
}


def crawl(pages, seed="https://h.com", max_depth=10, workers=1, fail=()):
	web = FakeWeb(pages, fail)
	res = Crawler(web.fetch).crawl(seed, CrawlOptions(max_depth=max_depth, workers=workers))
	return web, res


def test_frontier_never_requeues_visited():
	f = Frontier("s")
	assert f.claim() == ["s"]
	f.push(["s", "a", "b", "a"])
	assert f.next == {"a", "b"}
	assert f.advance(max_depth=5)
	assert f.claim() == ["a", "b"]
	f.push(["a", "s"])
	assert not f.advance(max_depth=5)


def test_frontier_depth_ceiling():
	f = Frontier("s")
	f.claim()
	f.push(["a"])
	assert not f.advance(max_depth=0)
	assert f.depth == 1


def test_full_crawl_visits_each_page_once():
	web, res = crawl(SITE)
	assert set(res.pages) == set(SITE) | {"https://h.com/"}
	assert len(web.calls) == len(set(web.calls)) == len(res.pages)
	assert res.fetches == len(res.pages)


def test_max_depth_zero_only_seed():
	web, res = crawl(SITE, max_depth=0)
	assert res.pages == ["https://h.com"]
	assert web.calls == ["https://h.com"]


def test_max_depth_counts_levels_inclusively():
	_, res = crawl(SITE, max_depth=1)
	assert set(res.pages) == {"https://h.com", "https://h.com/a", "https://h.com/b"}
	_, res = crawl(SITE, max_depth=2)
	assert "https://h.com/a/1" in res.pages
	assert "https://h.com/a/1/deep" not in res.pages
	assert res.levels == 3


def test_external_links_never_visited():
	web, res = crawl(SITE)
	assert all(u.startswith("https://h.com") for u in res.pages)
	assert "https://other.com/z" not in web.calls


def test_end_to_end_example():
	pages = {"https://example.com": ["/about", "https://external.com/x"]}
	_, res = crawl(pages, seed="https://example.com", max_depth=1)
	assert sorted(res.pages) == ["https://example.com", "https://example.com/about"]


def test_idempotent():
	_, first = crawl(SITE)
	_, second = crawl(SITE)
	assert set(first.pages) == set(second.pages)


def test_fetch_failure_aborts_traversal():
	with pytest.raises(FetchError) as exc:
		crawl(SITE, fail={"https://h.com/b"})
	assert exc.value.url == "https://h.com/b"


@pytest.mark.parametrize("workers", [2, 8])
def test_parallel_level_matches_sequential(workers):
	web, res = crawl(SITE, workers=workers)
	_, seq = crawl(SITE)
	assert set(res.pages) == set(seq.pages)
	assert len(web.calls) == len(set(web.calls))


def test_parallel_failure_propagates():
	with pytest.raises(FetchError):
		crawl(SITE, workers=4, fail={"https://h.com/a"})


def test_extraction_failure_aborts_traversal():
	web = FakeWeb(SITE)

	def broken_extract(content):
		raise ParseError("unparseable page")

	with pytest.raises(ParseError):
		Crawler(web.fetch, broken_extract).crawl("https://h.com", CrawlOptions(max_depth=3))
	assert web.calls == ["https://h.com"]
