"""Speech level assessment.

A child's level is an integer in 0..3. Two pure policies produce it:

- age bucketing (used once, when a profile is created)
- known-word count bucketing (used after every vocabulary change)

Both are total over their domains and never return anything outside 0..3.
"""
from __future__ import annotations

import enum
from datetime import date, datetime
from typing import Dict, Optional, Union


MIN_LEVEL = 0
MAX_LEVEL = 3
LEVELS = (0, 1, 2, 3)

# Half-open age bands in months: [lower, next lower)
AGE_THRESHOLDS_MONTHS = ((36, 3), (24, 2), (18, 1))
# Half-open known-word bands: [lower, next lower)
WORD_COUNT_THRESHOLDS = ((200, 3), (50, 2), (10, 1))


class InvalidInput(ValueError):
	"""Raised when a level cannot be computed from the given input."""


class LevelSource(str, enum.Enum):
	AGE = "age"
	VOCABULARY_SIZE = "vocabulary_size"
	MANUAL_OVERRIDE = "manual_override"


LEVEL_INFO: Dict[int, Dict[str, str]] = {
	0: {
		"name": "Level 0",
		"title": "Early Sounds",
		"description": "Early sounds and first words",
		"word_range": "0-10 words",
		"age_range": "12-18 months",
	},
	1: {
		"name": "Level 1",
		"title": "First Words",
		"description": "Single words and simple phrases",
		"word_range": "10-50 words",
		"age_range": "18-24 months",
	},
	2: {
		"name": "Level 2",
		"title": "Word Combinations",
		"description": "Word combinations and short sentences",
		"word_range": "50-200 words",
		"age_range": "2-3 years",
	},
	3: {
		"name": "Level 3",
		"title": "Complex Speech",
		"description": "Complex speech and conversations",
		"word_range": "200+ words",
		"age_range": "3-4 years",
	},
}


def level_label(level: int) -> str:
	info = LEVEL_INFO.get(level)
	if info is None:
		return "Unknown"
	return f"{info['name']}: {info['title']}"


def parse_date(value: Union[str, date, datetime]) -> date:
	"""Coerce an ISO string, date or datetime into a calendar date."""
	if isinstance(value, datetime):
		return value.date()
	if isinstance(value, date):
		return value
	if isinstance(value, str):
		text = value.strip()
		if not text:
			raise InvalidInput("birth date is required")
		try:
			if len(text) == 10:
				return date.fromisoformat(text)
			# Timestamps such as "2024-01-01T00:00:00.000Z"; the whole string must parse
			if text.endswith(("Z", "z")):
				text = text[:-1] + "+00:00"
			return datetime.fromisoformat(text).date()
		except ValueError:
			raise InvalidInput(f"birth date is not a valid ISO date: {value!r}")
	raise InvalidInput(f"expected a date, got {type(value).__name__}")


def age_in_months(birth_date: Union[str, date, datetime], now: Optional[Union[date, datetime]] = None) -> int:
	# Calendar months only; day of month is ignored
	born = parse_date(birth_date)
	current = parse_date(now) if now is not None else date.today()
	return (current.year - born.year) * 12 + (current.month - born.month)


def level_from_age(birth_date: Union[str, date, datetime], now: Optional[Union[date, datetime]] = None) -> int:
	"""Level from age in whole calendar months.

	< 18 months -> 0, [18, 24) -> 1, [24, 36) -> 2, >= 36 -> 3.
	A future birth date yields a negative age and therefore level 0.
	"""
	months = age_in_months(birth_date, now)
	for lower, level in AGE_THRESHOLDS_MONTHS:
		if months >= lower:
			return level
	return MIN_LEVEL


def level_from_known_word_count(total_known_words: int) -> int:
	"""Level from the total number of known words, regardless of word level.

	< 10 -> 0, [10, 50) -> 1, [50, 200) -> 2, >= 200 -> 3.
	"""
	if isinstance(total_known_words, bool) or not isinstance(total_known_words, int):
		raise InvalidInput(f"known word count must be an integer, got {total_known_words!r}")
	if total_known_words < 0:
		raise InvalidInput(f"known word count must be >= 0, got {total_known_words}")
	for lower, level in WORD_COUNT_THRESHOLDS:
		if total_known_words >= lower:
			return level
	return MIN_LEVEL


def validate_level(level: int) -> int:
	if isinstance(level, bool) or not isinstance(level, int) or level not in LEVELS:
		raise InvalidInput(f"level must be one of {list(LEVELS)}, got {level!r}")
	return level
