from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Exercise, ExerciseResult
from ..scoring import EXERCISE_TYPES, score_exercise
from .auth import CurrentUser, get_current_user
from .children import get_owned_child
from .progress import bump_weekly_progress

router = APIRouter(prefix="/exercises", tags=["exercises"])

logger = logging.getLogger(__name__)


class ExerciseOut(BaseModel):
	id: str
	title: str
	description: Optional[str] = None
	type: str
	level: int
	category_id: Optional[str] = None
	word_id: Optional[str] = None
	content: Dict[str, Any]
	media_url: Optional[str] = None


class ResultRequest(BaseModel):
	child_id: str
	selected_answers: List[str] = Field(default_factory=list)
	time_spent: int = Field(default=0, ge=0)
	skipped: bool = False


class ResultOut(BaseModel):
	id: str
	child_id: str
	exercise_id: str
	status: str
	score: Optional[int] = None
	passed: bool
	time_spent: int
	notes: Optional[str] = None
	created_at: datetime


def exercise_out(row: Exercise) -> ExerciseOut:
	return ExerciseOut(
		id=row.id,
		title=row.title,
		description=row.description,
		type=row.type,
		level=row.level,
		category_id=row.category_id,
		word_id=row.word_id,
		content=row.content or {},
		media_url=row.media_url,
	)


@router.get("", response_model=List[ExerciseOut])
async def list_exercises(
	level: Optional[int] = None,
	type: Optional[str] = None,
	user: CurrentUser = Depends(get_current_user),
	db: Session = Depends(get_db),
):
	query = db.query(Exercise)
	if level is not None:
		if level not in (0, 1, 2, 3):
			raise HTTPException(status_code=400, detail="level must be one of 0,1,2,3")
		query = query.filter(Exercise.level == level)
	if type is not None:
		kind = type.upper()
		if kind not in EXERCISE_TYPES:
			raise HTTPException(status_code=400, detail=f"type must be one of {', '.join(EXERCISE_TYPES)}")
		query = query.filter(Exercise.type == kind)
	rows = query.order_by(Exercise.level.asc(), Exercise.title.asc()).all()
	return [exercise_out(r) for r in rows]


@router.get("/{exercise_id}", response_model=ExerciseOut)
async def get_exercise(exercise_id: str, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
	row = db.get(Exercise, exercise_id)
	if row is None:
		raise HTTPException(status_code=404, detail="Exercise not found")
	return exercise_out(row)


@router.post("/{exercise_id}/results", response_model=ResultOut, status_code=201)
async def submit_result(
	exercise_id: str,
	req: ResultRequest,
	user: CurrentUser = Depends(get_current_user),
	db: Session = Depends(get_db),
):
	exercise = db.get(Exercise, exercise_id)
	if exercise is None:
		raise HTTPException(status_code=404, detail="Exercise not found")
	get_owned_child(db, req.child_id, user)

	outcome = score_exercise(exercise.type, exercise.content or {}, req.selected_answers, skipped=req.skipped)
	notes = "Skipped" if req.skipped else f"Score: {outcome.score}%"
	row = ExerciseResult(
		child_id=req.child_id,
		exercise_id=exercise.id,
		status=outcome.status,
		score=outcome.score,
		time_spent=req.time_spent,
		notes=notes,
	)
	try:
		db.add(row)
		if not req.skipped:
			bump_weekly_progress(db, req.child_id, exercises=1, score=outcome.score or 0)
		db.commit()
	except SQLAlchemyError:
		db.rollback()
		logger.exception("Saving exercise result failed")
		raise HTTPException(status_code=500, detail="Failed to save exercise result")
	db.refresh(row)
	logger.info("Child %s %s exercise %s (score %s)", req.child_id, outcome.status.lower(), exercise.id, outcome.score)
	return ResultOut(
		id=row.id,
		child_id=row.child_id,
		exercise_id=row.exercise_id,
		status=row.status,
		score=row.score,
		passed=outcome.passed,
		time_spent=row.time_spent,
		notes=row.notes,
		created_at=row.created_at,
	)
