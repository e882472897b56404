# LinkMap — Page retrieval
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Optional

import requests

from ..errors import FetchError
from ..utils.net import build_session


logger = logging.getLogger(__name__)


class PageFetcher:
	"""Blocking GET returning the raw response body."""

	def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> None:
		self.session = session or build_session()
		self.timeout = timeout

	def fetch(self, url: str) -> bytes:
		try:
			r = self.session.get(url, timeout=self.timeout)
			content = r.content
		except requests.RequestException as e:
			raise FetchError(url, str(e)) from e
		if not r.ok:
			# the body of an error page is still scanned for links
			logger.debug("HTTP %s for %s", r.status_code, url)
		return content


def make_fetcher(user_agent: Optional[str] = None, timeout: Optional[float] = None) -> PageFetcher:
	return PageFetcher(build_session(user_agent=user_agent), timeout=timeout)
