"""Keep a child's stored level in line with the assessment policies.

Three writers set ``Child.level``: profile creation (age), vocabulary
mutations (known-word count) and the guided assessment (manual override).
Each write records its ``LevelSource`` next to the level.
"""
from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterator, Optional, Protocol, Tuple, Union

from sqlalchemy import func
from sqlalchemy.orm import Session

from .levels import LevelSource, level_from_age, level_from_known_word_count, validate_level
from .models import Child, ChildWord


logger = logging.getLogger(__name__)


class ChildNotFound(LookupError):
	pass


class LevelStore(Protocol):
	def get_level(self, child_id: str) -> int: ...

	def count_known_words(self, child_id: str) -> int: ...

	def set_level(self, child_id: str, level: int, source: LevelSource) -> None: ...


class SqlLevelStore:
	"""LevelStore over a SQLAlchemy session. Flushes but never commits."""

	def __init__(self, db: Session) -> None:
		self.db = db

	def _child(self, child_id: str) -> Child:
		child = self.db.get(Child, child_id)
		if child is None:
			raise ChildNotFound(child_id)
		return child

	def get_level(self, child_id: str) -> int:
		return self._child(child_id).level

	def count_known_words(self, child_id: str) -> int:
		total = self.db.query(func.count(ChildWord.id)).filter(ChildWord.child_id == child_id).scalar()
		return int(total or 0)

	def set_level(self, child_id: str, level: int, source: LevelSource) -> None:
		child = self._child(child_id)
		child.level = level
		child.level_source = source.value
		self.db.add(child)
		self.db.flush()


class ChildLocks:
	"""Re-entrant lock per child id, shared by every request in the process.

	The handlers that mutate a child's level are plain ``def`` endpoints, so
	FastAPI runs them in its threadpool and these locks serialize them. An
	``async def`` caller would hold the lock on the event loop thread, where
	it excludes nothing.

	Entries are created on first use and dropped only by ``discard`` (child
	deletion), so the map grows with the number of children touched since
	startup. One ``RLock`` per child is small enough to keep for a
	single-process deployment.
	"""

	def __init__(self) -> None:
		self._guard = threading.Lock()
		self._locks: Dict[str, threading.RLock] = {}

	def get(self, child_id: str) -> threading.RLock:
		with self._guard:
			lock = self._locks.get(child_id)
			if lock is None:
				lock = threading.RLock()
				self._locks[child_id] = lock
			return lock

	@contextmanager
	def hold(self, child_id: str) -> Iterator[None]:
		lock = self.get(child_id)
		with lock:
			yield

	def discard(self, child_id: str) -> None:
		with self._guard:
			self._locks.pop(child_id, None)

	def __len__(self) -> int:
		return len(self._locks)


@dataclass(frozen=True)
class LevelChange:
	child_id: str
	previous: int
	current: int
	source: LevelSource
	changed: bool


def initial_level(birth_date: Union[str, date, datetime], now: Optional[Union[date, datetime]] = None) -> Tuple[int, LevelSource]:
	"""Cold-start level for a new profile, from age alone."""
	return level_from_age(birth_date, now), LevelSource.AGE


class LevelAssessor:
	def __init__(self, store: LevelStore, locks: Optional[ChildLocks] = None) -> None:
		self.store = store
		self.locks = locks or ChildLocks()

	def lock_for(self, child_id: str):
		return self.locks.hold(child_id)

	def recompute(self, child_id: str) -> LevelChange:
		"""Recompute from the known-word count; write only if the level moved."""
		with self.locks.hold(child_id):
			previous = self.store.get_level(child_id)
			total = self.store.count_known_words(child_id)
			current = level_from_known_word_count(total)
			if current == previous:
				return LevelChange(child_id, previous, current, LevelSource.VOCABULARY_SIZE, False)
			self.store.set_level(child_id, current, LevelSource.VOCABULARY_SIZE)
		logger.info("Child %s level updated from %s to %s (%s known words)", child_id, previous, current, total)
		return LevelChange(child_id, previous, current, LevelSource.VOCABULARY_SIZE, True)

	def override(self, child_id: str, level: int) -> LevelChange:
		"""Set the level directly, bypassing both policies."""
		level = validate_level(level)
		with self.locks.hold(child_id):
			previous = self.store.get_level(child_id)
			self.store.set_level(child_id, level, LevelSource.MANUAL_OVERRIDE)
		logger.info("Child %s level set manually from %s to %s", child_id, previous, level)
		return LevelChange(child_id, previous, level, LevelSource.MANUAL_OVERRIDE, previous != level)
