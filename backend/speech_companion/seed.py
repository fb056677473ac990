"""Load the static catalogue (and optionally sample families) into the database.

    python -m speech_companion.seed [--sample] [--reset] [--database-url URL]
"""
from __future__ import annotations

import argparse
import logging
import random
from datetime import date, datetime, timedelta
from typing import Dict, Optional, Tuple

from sqlalchemy.orm import Session

from .assessment import initial_level
from .db import Database
from .models import AuthSession, Category, Child, ChildWord, Exercise, ExerciseResult, User, WeeklyProgress, Word
from .routers.progress import week_start
from .seed_data import CATEGORIES, EXERCISE_TEMPLATES, WORDS
from .settings import settings


logger = logging.getLogger(__name__)

SAMPLE_PARENT_EMAIL = "parent@example.com"
SAMPLE_PARENT_PASSWORD = "password123"
# (name, age in months, cap on known words)
SAMPLE_CHILDREN = [
    ("Emma", 15, 15),
    ("Liam", 20, 40),
    ("Sophia", 30, 80),
    ("Noah", 42, 150),
]


def months_ago(today: date, months: int) -> date:
    total = today.year * 12 + (today.month - 1) - months
    return date(total // 12, total % 12 + 1, min(today.day, 28))


def clear_all(db: Session) -> None:
    for model in (ExerciseResult, WeeklyProgress, Exercise, ChildWord, Word, Child, Category, AuthSession, User):
        db.query(model).delete()
    db.commit()


def seed_catalogue(db: Session) -> Dict[str, int]:
    """Insert categories, words and exercises. A no-op when categories already exist."""
    if db.query(Category).first() is not None:
        logger.info("Catalogue already present, skipping")
        return {"categories": 0, "words": 0, "exercises": 0}

    category_ids: Dict[str, str] = {}
    for name, description, icon in CATEGORIES:
        row = Category(name=name, description=description, icon=icon)
        db.add(row)
        db.flush()
        category_ids[name] = row.id

    word_ids: Dict[Tuple[str, int], str] = {}
    for text, level, category, difficulty in WORDS:
        category_id = category_ids.get(category)
        if category_id is None:
            logger.warning("Category not found for word %s (%s)", text, category)
            continue
        # (text, level) is unique: the first entry wins
        if (text, level) in word_ids:
            continue
        row = Word(text=text, level=level, category_id=category_id, difficulty=difficulty)
        db.add(row)
        db.flush()
        word_ids[(text, level)] = row.id

    for template in EXERCISE_TEMPLATES:
        category_id = category_ids.get(template.get("category")) if template.get("category") else None
        word_id = word_ids.get((template["word"], template["level"])) if template.get("word") else None
        db.add(Exercise(
            title=template["title"],
            description=template.get("description"),
            type=template["type"],
            level=template["level"],
            category_id=category_id,
            word_id=word_id,
            content=template["content"],
            media_url=template.get("media_url"),
        ))

    db.commit()
    counts = {"categories": len(category_ids), "words": len(word_ids), "exercises": len(EXERCISE_TEMPLATES)}
    logger.info("Seeded catalogue: %s", counts)
    return counts


def seed_sample_families(db: Session, *, today: Optional[date] = None, rng: Optional[random.Random] = None) -> Optional[User]:
    """Sample parent with one child per level, some known words and weekly progress."""
    from .routers.auth import hash_password

    if db.query(User).filter(User.email == SAMPLE_PARENT_EMAIL).first() is not None:
        logger.info("Sample parent already present, skipping")
        return None
    today = today or date.today()
    rng = rng or random.Random(42)

    parent = User(name="Sample Parent", email=SAMPLE_PARENT_EMAIL, password_hash=hash_password(SAMPLE_PARENT_PASSWORD))
    db.add(parent)
    db.flush()

    words = db.query(Word).all()
    for name, age_months, cap in SAMPLE_CHILDREN:
        birth_date = months_ago(today, age_months)
        level, source = initial_level(birth_date, today)
        child = Child(name=name, birth_date=birth_date, level=level, level_source=source.value, user_id=parent.id)
        db.add(child)
        db.flush()

        level_words = [w for w in words if w.level <= level]
        known_count = min(int(len(level_words) * 0.3), cap)
        for word in rng.sample(level_words, known_count):
            learned = datetime.utcnow() - timedelta(days=rng.random() * 30)
            db.add(ChildWord(child_id=child.id, word_id=word.id, date_learned=learned))

        for week in range(4):
            db.add(WeeklyProgress(
                child_id=child.id,
                week_start=week_start(today - timedelta(days=7 * week)),
                words_learned=rng.randint(1, 10),
                exercises_done=rng.randint(5, 19),
                total_score=rng.randint(300, 799),
            ))
        logger.info("Created child %s (level %s) with %s known words", name, level, known_count)

    db.commit()
    return parent


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed the speech companion database")
    parser.add_argument("--database-url", default=None, help="SQLAlchemy URL (defaults to DATABASE_URL)")
    parser.add_argument("--sample", action="store_true", help="Also create a sample parent and children")
    parser.add_argument("--reset", action="store_true", help="Delete existing rows before seeding")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    database = Database(args.database_url or settings.resolved_database_url()).open()
    try:
        database.create_all()
        db = database.session()
        try:
            if args.reset:
                logger.info("Clearing existing data")
                clear_all(db)
            seed_catalogue(db)
            if args.sample:
                seed_sample_families(db)
        finally:
            db.close()
    finally:
        database.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
