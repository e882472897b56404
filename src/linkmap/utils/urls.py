# LinkMap — URL utilities: origin resolution and same-origin filtering
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Iterable, List, Optional
from urllib.parse import urlparse

from ..errors import ParseError


def _authority(url: str) -> str:
	"""host[:port] of url, without any user:password@ prefix."""
	try:
		netloc = urlparse(url).netloc
	except ValueError as e:
		raise ParseError(f"malformed URL {url!r}: {e}") from e
	return netloc.rpartition("@")[2]


def origin_of(url: str) -> str:
	"""Return scheme://host[:port] of an absolute URL."""
	host = _authority(url)
	scheme = urlparse(url).scheme
	if not scheme or not host:
		raise ParseError(f"URL has no scheme or host: {url!r}")
	return f"{scheme}://{host}"


def host_of(url: str) -> str:
	host = _authority(url)
	if not host:
		raise ParseError(f"URL has no host: {url!r}")
	return host


def same_origin(url: str, origin: str) -> bool:
	"""Prefix match on origin that stops at a URL boundary."""
	if not url.startswith(origin):
		return False
	rest = url[len(origin):]
	return rest == "" or rest[0] in "/?#"


def resolve_link(origin: str, href: str) -> Optional[str]:
	"""Make href absolute against origin, or None when it is out of scope.

	Only origin-relative paths and absolute http(s) links on the same origin
	survive; protocol-relative, fragment, mailto: and javascript: links drop.
	"""
	if href.startswith("//"):
		return None
	if href.startswith("/"):
		return origin + href
	if href.startswith("http") and same_origin(href, origin):
		return href
	return None


def filter_links(origin: str, hrefs: Iterable[str]) -> List[str]:
	out: List[str] = []
	for href in hrefs:
		url = resolve_link(origin, href)
		if url is not None:
			out.append(url)
	return out


__all__ = [
	"origin_of",
	"host_of",
	"same_origin",
	"resolve_link",
	"filter_links",
]
