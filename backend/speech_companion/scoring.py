from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional


EXERCISE_TYPES = (
	"WORD_RECOGNITION",
	"PRONUNCIATION",
	"MATCHING",
	"CATEGORIZATION",
	"FILL_IN_BLANK",
	"STORY_TELLING",
	"SOUND_RECOGNITION",
)

PASS_THRESHOLD = 70
MATCHING_SCORE = 80
DEFAULT_SCORE = 75


@dataclass(frozen=True)
class ExerciseScore:
	status: str
	score: Optional[int]

	@property
	def passed(self) -> bool:
		return self.status == "COMPLETED"


def _word_recognition_score(content: Dict[str, Any], selected: Iterable[str]) -> int:
	correct = {img.get("url") for img in content.get("images") or [] if img.get("isCorrect")}
	if not correct:
		return 0
	hits = {answer for answer in selected if answer in correct}
	return round(len(hits) / len(correct) * 100)


def score_exercise(exercise_type: str, content: Dict[str, Any], selected_answers: Iterable[str], *, skipped: bool = False) -> ExerciseScore:
	if skipped:
		return ExerciseScore(status="SKIPPED", score=None)
	selected = [str(a) for a in selected_answers]
	if exercise_type == "WORD_RECOGNITION":
		score = _word_recognition_score(content or {}, selected)
	elif exercise_type == "MATCHING":
		# Pairing is checked by the parent, any submission counts
		score = MATCHING_SCORE if selected else 0
	else:
		score = DEFAULT_SCORE if selected else 0
	status = "COMPLETED" if score >= PASS_THRESHOLD else "ATTEMPTED"
	return ExerciseScore(status=status, score=score)
