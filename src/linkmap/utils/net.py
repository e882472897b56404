# LinkMap — Networking utilities (requests session)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional

import requests


def build_session(user_agent: Optional[str] = None) -> requests.Session:
	"""Build a plain requests Session.

	Headers are left at the client defaults unless a User-Agent is given.
	No retry adapter is mounted: a failed request fails the run.
	"""
	s = requests.Session()
	if user_agent:
		s.headers.update({"User-Agent": user_agent})
	return s
