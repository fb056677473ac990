from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from ..assessment import ChildLocks, LevelAssessor, SqlLevelStore
from ..db import get_db
from ..models import Category, ChildWord, Word
from .auth import CurrentUser, get_current_user
from .children import LevelChangeOut, get_child_locks, get_owned_child, level_change_out
from .progress import bump_weekly_progress


router = APIRouter(prefix="/vocabulary", tags=["vocabulary"])

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY_ICON = "📝"


class CategoryRef(BaseModel):
    id: str
    name: str
    icon: str


class WordOut(BaseModel):
    id: str
    text: str
    level: int
    difficulty: int
    image_url: Optional[str] = None
    audio_url: Optional[str] = None
    category: CategoryRef


class CategoryOut(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    icon: str
    words: List[WordOut]


class CategoriesResponse(BaseModel):
    categories: List[CategoryOut]


class ChildVocabularyResponse(BaseModel):
    known_words: List[WordOut]
    # Reserved for a "learning" status; nothing is stored for it yet
    learning_words: List[WordOut]


class WordStatusRequest(BaseModel):
    status: Literal["known", "learning", "remove"]


class WordStatusResponse(BaseModel):
    ok: bool
    word_id: str
    status: str
    known_words_total: int
    level: LevelChangeOut


def _category_ref(category: Category) -> CategoryRef:
    return CategoryRef(id=category.id, name=category.name, icon=category.icon or DEFAULT_CATEGORY_ICON)


def word_out(word: Word) -> WordOut:
    return WordOut(
        id=word.id,
        text=word.text,
        level=word.level,
        difficulty=word.difficulty,
        image_url=word.image_url,
        audio_url=word.audio_url,
        category=_category_ref(word.category),
    )


def _sort_key(word: Word):
    return (word.level, word.difficulty, word.text)


@router.get("/categories", response_model=CategoriesResponse)
async def categories_with_words(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    categories = (
        db.query(Category)
        .options(selectinload(Category.words))
        .order_by(Category.name.asc())
        .all()
    )
    out: List[CategoryOut] = []
    for category in categories:
        out.append(
            CategoryOut(
                id=category.id,
                name=category.name,
                description=category.description,
                icon=category.icon or DEFAULT_CATEGORY_ICON,
                words=[word_out(w) for w in sorted(category.words, key=_sort_key)],
            )
        )
    logger.debug("Found %s categories, %s words", len(out), sum(len(c.words) for c in out))
    return CategoriesResponse(categories=out)


@router.get("/levels/{level}", response_model=List[WordOut])
async def words_for_level(level: int, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    if level not in (0, 1, 2, 3):
        raise HTTPException(status_code=400, detail="level must be one of 0,1,2,3")
    rows = db.query(Word).filter(Word.level == level).all()
    return [word_out(w) for w in sorted(rows, key=_sort_key)]


@router.get("/children/{child_id}", response_model=ChildVocabularyResponse)
async def child_vocabulary(child_id: str, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    get_owned_child(db, child_id, user)
    rows = (
        db.query(ChildWord)
        .options(selectinload(ChildWord.word).selectinload(Word.category))
        .filter(ChildWord.child_id == child_id)
        .all()
    )
    known = sorted((cw.word for cw in rows), key=_sort_key)
    return ChildVocabularyResponse(known_words=[word_out(w) for w in known], learning_words=[])


@router.post("/children/{child_id}/words/{word_id}", response_model=WordStatusResponse)
def update_word_status(
    child_id: str,
    word_id: str,
    req: WordStatusRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    locks: ChildLocks = Depends(get_child_locks),
):
    get_owned_child(db, child_id, user)
    if db.get(Word, word_id) is None:
        raise HTTPException(status_code=404, detail="Word not found")

    store = SqlLevelStore(db)
    assessor = LevelAssessor(store, locks)
    try:
        # Mutation, recount and level write commit together, one child at a time
        with assessor.lock_for(child_id):
            existing = (
                db.query(ChildWord)
                .filter(ChildWord.child_id == child_id, ChildWord.word_id == word_id)
                .first()
            )
            if req.status == "remove":
                if existing is not None:
                    db.delete(existing)
            elif req.status == "known":
                now = datetime.utcnow()
                if existing is None:
                    db.add(ChildWord(child_id=child_id, word_id=word_id, date_learned=now, notes="Known"))
                    bump_weekly_progress(db, child_id, words=1)
                else:
                    existing.date_learned = now
                    existing.notes = "Known"
            # "learning" has no stored state yet; the level is still re-checked
            db.flush()
            change = assessor.recompute(child_id)
            total = store.count_known_words(child_id)
            db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Update word status failed for child %s", child_id)
        raise HTTPException(status_code=500, detail="Failed to update word status")

    return WordStatusResponse(
        ok=True,
        word_id=word_id,
        status=req.status,
        known_words_total=total,
        level=level_change_out(change),
    )

