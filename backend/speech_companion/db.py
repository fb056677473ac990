from __future__ import annotations
import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from sqlalchemy.pool import StaticPool


logger = logging.getLogger(__name__)

Base = declarative_base()


def _is_memory_sqlite(url: str) -> bool:
	return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


class Database:
	"""Explicitly constructed store handle.

	Nothing touches the database until ``open()`` is called, and ``close()``
	disposes the connection pool. The application factory owns one instance
	and request handlers reach it through ``get_db``.
	"""

	def __init__(self, url: str, *, echo: bool = False) -> None:
		self.url = url
		self.echo = echo
		self._engine: Optional[Engine] = None
		self._sessionmaker: Optional[sessionmaker] = None

	@property
	def engine(self) -> Engine:
		if self._engine is None:
			raise RuntimeError("database is not open")
		return self._engine

	@property
	def is_open(self) -> bool:
		return self._engine is not None

	def open(self) -> "Database":
		if self._engine is not None:
			return self
		kwargs = {"echo": self.echo, "future": True}
		if self.url.startswith("sqlite"):
			kwargs["connect_args"] = {"check_same_thread": False}
			# A single shared connection keeps an in-memory database alive across sessions
			if _is_memory_sqlite(self.url):
				kwargs["poolclass"] = StaticPool
		self._engine = create_engine(self.url, **kwargs)
		self._sessionmaker = sessionmaker(autocommit=False, autoflush=False, bind=self._engine, future=True)
		logger.info("Opened database %s", self._engine.url.render_as_string(hide_password=True))
		return self

	def create_all(self) -> None:
		# Import models so every table is registered on Base.metadata
		from . import models  # noqa: F401
		Base.metadata.create_all(bind=self.engine)

	def drop_all(self) -> None:
		from . import models  # noqa: F401
		Base.metadata.drop_all(bind=self.engine)

	def session(self) -> Session:
		if self._sessionmaker is None:
			raise RuntimeError("database is not open")
		return self._sessionmaker()

	def close(self) -> None:
		if self._engine is None:
			return
		self._engine.dispose()
		logger.info("Closed database")
		self._engine = None
		self._sessionmaker = None


def get_db(request: Request) -> Iterator[Session]:
	database: Database = request.app.state.database
	db = database.session()
	try:
		yield db
	finally:
		db.close()
