from __future__ import annotations
from datetime import date, timedelta
from typing import Dict, List, Optional
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Child, ChildWord, ExerciseResult, WeeklyProgress, Word
from .auth import CurrentUser, get_current_user
from .children import ChildOut, child_out, get_owned_child

router = APIRouter(prefix="/progress", tags=["progress"])

logger = logging.getLogger(__name__)

WEEKS_SHOWN = 8


def week_start(day: date) -> date:
	# Weeks start on Monday
	return day - timedelta(days=day.weekday())


def bump_weekly_progress(db: Session, child_id: str, *, words: int = 0, exercises: int = 0, score: int = 0, today: Optional[date] = None) -> WeeklyProgress:
	"""Add to this week's counters, creating the row on first use. Does not commit."""
	start = week_start(today or date.today())
	row = (
		db.query(WeeklyProgress)
		.filter(WeeklyProgress.child_id == child_id, WeeklyProgress.week_start == start)
		.first()
	)
	if row is None:
		row = WeeklyProgress(child_id=child_id, week_start=start, words_learned=0, exercises_done=0, total_score=0)
		db.add(row)
	row.words_learned += words
	row.exercises_done += exercises
	row.total_score += score
	db.flush()
	return row


class WeekOut(BaseModel):
	week_start: date
	words_learned: int
	exercises_done: int
	total_score: int


class ChildProgress(BaseModel):
	child: ChildOut
	known_words_total: int
	known_words_by_level: Dict[int, int]
	exercises_completed: int
	exercises_attempted: int
	exercises_skipped: int
	average_score: Optional[float] = None
	weekly: List[WeekOut]


class DashboardResponse(BaseModel):
	children: List[ChildProgress]
	known_words_total: int
	exercises_completed: int


def child_progress(db: Session, child: Child) -> ChildProgress:
	by_level: Dict[int, int] = {0: 0, 1: 0, 2: 0, 3: 0}
	rows = (
		db.query(Word.level, func.count(ChildWord.id))
		.join(ChildWord, ChildWord.word_id == Word.id)
		.filter(ChildWord.child_id == child.id)
		.group_by(Word.level)
		.all()
	)
	for level, count in rows:
		by_level[int(level)] = int(count)

	statuses = dict(
		db.query(ExerciseResult.status, func.count(ExerciseResult.id))
		.filter(ExerciseResult.child_id == child.id)
		.group_by(ExerciseResult.status)
		.all()
	)
	average = (
		db.query(func.avg(ExerciseResult.score))
		.filter(ExerciseResult.child_id == child.id, ExerciseResult.score.isnot(None))
		.scalar()
	)
	weeks = (
		db.query(WeeklyProgress)
		.filter(WeeklyProgress.child_id == child.id)
		.order_by(WeeklyProgress.week_start.desc())
		.limit(WEEKS_SHOWN)
		.all()
	)
	return ChildProgress(
		child=child_out(child),
		known_words_total=sum(by_level.values()),
		known_words_by_level=by_level,
		exercises_completed=int(statuses.get("COMPLETED", 0)),
		exercises_attempted=int(statuses.get("ATTEMPTED", 0)),
		exercises_skipped=int(statuses.get("SKIPPED", 0)),
		average_score=round(float(average), 1) if average is not None else None,
		weekly=[
			WeekOut(week_start=w.week_start, words_learned=w.words_learned, exercises_done=w.exercises_done, total_score=w.total_score)
			for w in weeks
		],
	)


@router.get("/children/{child_id}", response_model=ChildProgress)
async def progress_for_child(child_id: str, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
	child = get_owned_child(db, child_id, user)
	return child_progress(db, child)


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
	children = (
		db.query(Child)
		.filter(Child.user_id == user.id)
		.order_by(Child.created_at.desc())
		.all()
	)
	summaries = [child_progress(db, c) for c in children]
	return DashboardResponse(
		children=summaries,
		known_words_total=sum(s.known_words_total for s in summaries),
		exercises_completed=sum(s.exercises_completed for s in summaries),
	)
