from __future__ import annotations
from typing import Optional
import asyncio
import logging

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from .assessment import ChildLocks
from .cleanup import purge_expired_sessions
from .db import Database
from .settings import Settings, settings as default_settings
from .routers import auth
from .routers import children
from .routers import vocabulary
from .routers import exercises
from .routers import progress
from . import seed

logger = logging.getLogger(__name__)


def _purge_sessions(database: Database) -> None:
	db = database.session()
	try:
		removed = purge_expired_sessions(db)
		if removed:
			logger.info("Purged %s expired sessions", removed)
	except SQLAlchemyError:
		db.rollback()
		logger.exception("Session cleanup failed")
	finally:
		db.close()


async def _cleanup_watcher(database: Database, interval: int):
	while True:
		await asyncio.sleep(interval)
		_purge_sessions(database)


def create_app(database: Optional[Database] = None, app_settings: Optional[Settings] = None) -> FastAPI:
	cfg = app_settings or default_settings
	logging.basicConfig(
		level=cfg.log_level.upper(),
		format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
		datefmt="%Y-%m-%d %H:%M:%S",
	)
	if database is None:
		database = Database(cfg.resolved_database_url(), echo=cfg.database_echo)

	app = FastAPI(title=cfg.app_title)
	app.state.database = database
	app.state.child_locks = ChildLocks()
	app.state.settings = cfg

	app.include_router(auth.router)
	app.include_router(children.router)
	app.include_router(vocabulary.router)
	app.include_router(exercises.router)
	app.include_router(progress.router)

	@app.get("/", include_in_schema=False)
	async def redirect_root_to_docs():
		return RedirectResponse(url="/docs")

	@app.get("/info")
	def root():
		return {"status": "ok", "database_open": database.is_open}

	@app.on_event("startup")
	async def startup_event():
		database.open()
		# Initialize DB schema
		database.create_all()
		if cfg.seed_on_startup:
			db = database.session()
			try:
				seed.seed_catalogue(db)
				if cfg.seed_sample_data:
					seed.seed_sample_families(db)
			finally:
				db.close()
		_purge_sessions(database)
		if cfg.session_cleanup_interval_seconds > 0:
			app.state.cleanup_task = asyncio.create_task(
				_cleanup_watcher(database, cfg.session_cleanup_interval_seconds)
			)

	@app.on_event("shutdown")
	async def shutdown_event():
		task = getattr(app.state, "cleanup_task", None)
		if task is not None:
			task.cancel()
		database.close()

	return app


app = create_app()
