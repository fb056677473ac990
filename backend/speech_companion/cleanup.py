from __future__ import annotations
from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy import delete
from sqlalchemy.orm import Session

from .models import AuthSession


def purge_expired_sessions(db: Session, now: Optional[datetime] = None, idle_days: int = 30) -> int:
	now = now or datetime.utcnow()
	idle_threshold = now - timedelta(days=idle_days)
	removed = 0

	# Tokens whose session row is gone stop validating, so this also revokes them
	res = db.execute(delete(AuthSession).where(AuthSession.expires_at <= now))
	removed += res.rowcount or 0

	# Sessions nobody has used for a long time, even if not yet expired
	res = db.execute(delete(AuthSession).where(AuthSession.last_activity_at < idle_threshold))
	removed += res.rowcount or 0

	db.commit()
	return removed
