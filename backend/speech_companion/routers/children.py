from __future__ import annotations
from datetime import date, datetime
from typing import List, Optional
import logging

from fastapi import APIRouter, HTTPException, Depends, Request
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..assessment import ChildLocks, LevelAssessor, LevelChange, SqlLevelStore, initial_level
from ..db import get_db
from ..levels import LEVEL_INFO, InvalidInput, age_in_months, level_label, parse_date
from ..models import Child
from ..seed_data import GUIDE_CATEGORIES
from .auth import CurrentUser, get_current_user

router = APIRouter(prefix="/children", tags=["children"])

logger = logging.getLogger(__name__)


def get_child_locks(request: Request) -> ChildLocks:
	return request.app.state.child_locks


def get_owned_child(db: Session, child_id: str, user: CurrentUser) -> Child:
	child = db.query(Child).filter(Child.id == child_id, Child.user_id == user.id).first()
	if child is None:
		raise HTTPException(status_code=404, detail="Child not found")
	return child


class ChildCreate(BaseModel):
	name: str = Field(min_length=1, max_length=50)
	birth_date: str

	@field_validator("name")
	@classmethod
	def _strip_name(cls, v: str) -> str:
		v = v.strip()
		if not v:
			raise ValueError("Name is required")
		return v

	@field_validator("birth_date")
	@classmethod
	def _valid_birth_date(cls, v: str) -> str:
		born = parse_date(v)
		if born > date.today():
			raise ValueError("Birth date cannot be in the future")
		return born.isoformat()


class ChildOut(BaseModel):
	id: str
	name: str
	birth_date: date
	age_months: int
	level: int
	level_source: str
	level_label: str
	created_at: datetime


class LevelOverride(BaseModel):
	level: int = Field(ge=0, le=3)


class LevelChangeOut(BaseModel):
	child_id: str
	previous: int
	current: int
	source: str
	changed: bool


def child_out(child: Child, today: Optional[date] = None) -> ChildOut:
	return ChildOut(
		id=child.id,
		name=child.name,
		birth_date=child.birth_date,
		age_months=age_in_months(child.birth_date, today),
		level=child.level,
		level_source=child.level_source,
		level_label=level_label(child.level),
		created_at=child.created_at,
	)


def level_change_out(change: LevelChange) -> LevelChangeOut:
	return LevelChangeOut(
		child_id=change.child_id,
		previous=change.previous,
		current=change.current,
		source=change.source.value,
		changed=change.changed,
	)


@router.post("", response_model=ChildOut, status_code=201)
async def create_child(req: ChildCreate, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
	birth_date = date.fromisoformat(req.birth_date)
	level, source = initial_level(birth_date)
	child = Child(name=req.name, birth_date=birth_date, level=level, level_source=source.value, user_id=user.id)
	try:
		db.add(child)
		db.commit()
	except SQLAlchemyError:
		db.rollback()
		logger.exception("Add child failed")
		raise HTTPException(status_code=500, detail="An error occurred while adding the child")
	db.refresh(child)
	logger.info("Added child %s (level %s) for %s", child.id, level, user.id)
	return child_out(child)


@router.get("", response_model=List[ChildOut])
async def list_children(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
	rows = (
		db.query(Child)
		.filter(Child.user_id == user.id)
		.order_by(Child.created_at.desc())
		.all()
	)
	return [child_out(c) for c in rows]


@router.get("/{child_id}", response_model=ChildOut)
async def get_child(child_id: str, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
	return child_out(get_owned_child(db, child_id, user))


@router.delete("/{child_id}")
async def delete_child(
	child_id: str,
	user: CurrentUser = Depends(get_current_user),
	db: Session = Depends(get_db),
	locks: ChildLocks = Depends(get_child_locks),
):
	child = get_owned_child(db, child_id, user)
	try:
		# Known words, exercise results and weekly progress go with the child
		db.delete(child)
		db.commit()
	except SQLAlchemyError:
		db.rollback()
		logger.exception("Delete child failed")
		raise HTTPException(status_code=500, detail="An error occurred while deleting the child")
	locks.discard(child_id)
	logger.info("Deleted child %s", child_id)
	return {"ok": True}


@router.put("/{child_id}/level", response_model=LevelChangeOut)
def override_level(
	child_id: str,
	req: LevelOverride,
	user: CurrentUser = Depends(get_current_user),
	db: Session = Depends(get_db),
	locks: ChildLocks = Depends(get_child_locks),
):
	get_owned_child(db, child_id, user)
	assessor = LevelAssessor(SqlLevelStore(db), locks)
	try:
		with assessor.lock_for(child_id):
			change = assessor.override(child_id, req.level)
			db.commit()
	except InvalidInput as e:
		db.rollback()
		raise HTTPException(status_code=400, detail=str(e))
	except SQLAlchemyError:
		db.rollback()
		logger.exception("Level override failed")
		raise HTTPException(status_code=500, detail="Failed to update level")
	return level_change_out(change)


@router.get("/{child_id}/assessment")
async def assessment_guide(child_id: str, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
	child = get_owned_child(db, child_id, user)
	levels = []
	for level, info in LEVEL_INFO.items():
		levels.append({
			"level": level,
			"name": info["name"],
			"title": info["title"],
			"description": info["description"],
			"word_range": info["word_range"],
			"age_range": info["age_range"],
			"categories": [
				{"name": name, "icon": icon, "words": list(words)}
				for name, icon, words in GUIDE_CATEGORIES.get(level, [])
			],
		})
	return {
		"child": child_out(child),
		"current_level": child.level,
		"levels": levels,
	}
