# LinkMap — Level-synchronized BFS frontier
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Iterable, List, Set


class Frontier:
	"""Current/next level double buffer plus the visited set of one traversal.

	A URL already visited is never inserted into either level.
	"""

	def __init__(self, seed: str) -> None:
		self.visited: Set[str] = set()
		self.current: Set[str] = {seed}
		self.next: Set[str] = set()
		self.depth = 0

	def claim(self) -> List[str]:
		"""Mark and return the current level's unvisited URLs, sorted."""
		batch = sorted(u for u in self.current if u not in self.visited)
		self.visited.update(batch)
		self.current = set()
		return batch

	def push(self, urls: Iterable[str]) -> None:
		for u in urls:
			if u not in self.visited:
				self.next.add(u)

	def advance(self, max_depth: int) -> bool:
		"""Swap buffers. False once the next level is empty or past max_depth.

		Levels 0 through max_depth inclusive are processed.
		"""
		if not self.next:
			return False
		self.current, self.next = self.next - self.visited, set()
		self.depth += 1
		return self.depth <= max_depth
