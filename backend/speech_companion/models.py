from __future__ import annotations
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Date, DateTime, Integer, Text, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .db import Base
from .levels import LevelSource


def _new_id() -> str:
	return uuid.uuid4().hex


class User(Base):
	__tablename__ = "users"
	id = Column(String(32), primary_key=True, default=_new_id)
	name = Column(String(128), nullable=False)
	email = Column(String(256), nullable=False, unique=True, index=True)
	password_hash = Column(String(256), nullable=False)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

	children = relationship("Child", back_populates="owner", cascade="all, delete-orphan")
	sessions = relationship("AuthSession", back_populates="user", cascade="all, delete-orphan")


class AuthSession(Base):
	__tablename__ = "auth_sessions"
	# Primary key is the token's jti
	session_id = Column(String(64), primary_key=True)
	user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	last_activity_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	expires_at = Column(DateTime, nullable=False)

	user = relationship("User", back_populates="sessions")


class Child(Base):
	__tablename__ = "children"
	id = Column(String(32), primary_key=True, default=_new_id)
	name = Column(String(50), nullable=False)
	birth_date = Column(Date, nullable=False)
	level = Column(Integer, default=0, nullable=False)
	# Which writer last set `level`: age, vocabulary_size or manual_override
	level_source = Column(String(32), default=LevelSource.AGE.value, nullable=False)
	user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

	owner = relationship("User", back_populates="children")
	known_words = relationship("ChildWord", back_populates="child", cascade="all, delete-orphan")
	exercise_results = relationship("ExerciseResult", back_populates="child", cascade="all, delete-orphan")
	weekly_progress = relationship("WeeklyProgress", back_populates="child", cascade="all, delete-orphan")


class Category(Base):
	__tablename__ = "categories"
	id = Column(String(32), primary_key=True, default=_new_id)
	name = Column(String(64), nullable=False, unique=True)
	description = Column(String(256), nullable=True)
	icon = Column(String(16), nullable=True)

	words = relationship("Word", back_populates="category")


class Word(Base):
	__tablename__ = "words"
	__table_args__ = (UniqueConstraint("text", "level", name="uq_word_text_level"),)
	id = Column(String(32), primary_key=True, default=_new_id)
	text = Column(String(64), nullable=False)
	# Level at which the word is typically introduced (0-3)
	level = Column(Integer, nullable=False, index=True)
	category_id = Column(String(32), ForeignKey("categories.id"), nullable=False, index=True)
	# 1-5 within the level
	difficulty = Column(Integer, default=1, nullable=False)
	image_url = Column(String(256), nullable=True)
	audio_url = Column(String(256), nullable=True)

	category = relationship("Category", back_populates="words")


class ChildWord(Base):
	__tablename__ = "child_words"
	__table_args__ = (UniqueConstraint("child_id", "word_id", name="uq_child_word"),)
	id = Column(String(32), primary_key=True, default=_new_id)
	child_id = Column(String(32), ForeignKey("children.id", ondelete="CASCADE"), nullable=False, index=True)
	word_id = Column(String(32), ForeignKey("words.id", ondelete="CASCADE"), nullable=False)
	date_learned = Column(DateTime, default=datetime.utcnow, nullable=False)
	notes = Column(Text, nullable=True)

	child = relationship("Child", back_populates="known_words")
	word = relationship("Word")


class Exercise(Base):
	__tablename__ = "exercises"
	id = Column(String(32), primary_key=True, default=_new_id)
	title = Column(String(128), nullable=False)
	description = Column(String(256), nullable=True)
	# WORD_RECOGNITION, PRONUNCIATION, MATCHING, CATEGORIZATION, FILL_IN_BLANK, STORY_TELLING, SOUND_RECOGNITION
	type = Column(String(32), nullable=False, index=True)
	level = Column(Integer, nullable=False, index=True)
	category_id = Column(String(32), ForeignKey("categories.id"), nullable=True)
	word_id = Column(String(32), ForeignKey("words.id"), nullable=True)
	content = Column(JSON, nullable=False, default=dict)
	media_url = Column(String(256), nullable=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class ExerciseResult(Base):
	__tablename__ = "exercise_results"
	id = Column(String(32), primary_key=True, default=_new_id)
	child_id = Column(String(32), ForeignKey("children.id", ondelete="CASCADE"), nullable=False, index=True)
	exercise_id = Column(String(32), ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False)
	# COMPLETED, ATTEMPTED or SKIPPED
	status = Column(String(16), nullable=False)
	score = Column(Integer, nullable=True)
	time_spent = Column(Integer, default=0, nullable=False)
	notes = Column(Text, nullable=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

	child = relationship("Child", back_populates="exercise_results")
	exercise = relationship("Exercise")


class WeeklyProgress(Base):
	__tablename__ = "weekly_progress"
	__table_args__ = (UniqueConstraint("child_id", "week_start", name="uq_child_week"),)
	id = Column(String(32), primary_key=True, default=_new_id)
	child_id = Column(String(32), ForeignKey("children.id", ondelete="CASCADE"), nullable=False, index=True)
	# Monday of the week
	week_start = Column(Date, nullable=False)
	words_learned = Column(Integer, default=0, nullable=False)
	exercises_done = Column(Integer, default=0, nullable=False)
	total_score = Column(Integer, default=0, nullable=False)

	child = relationship("Child", back_populates="weekly_progress")
