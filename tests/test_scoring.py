import pytest

from speech_companion.scoring import (
    DEFAULT_SCORE,
    MATCHING_SCORE,
    score_exercise,
)


COLOR_HUNT = {
    "images": [
        {"url": "/images/red-apple.jpg", "isCorrect": True},
        {"url": "/images/blue-ball.jpg", "isCorrect": False},
        {"url": "/images/red-car.jpg", "isCorrect": True},
    ]
}


class TestWordRecognition:
    def test_all_correct(self):
        result = score_exercise("WORD_RECOGNITION", COLOR_HUNT, ["/images/red-apple.jpg", "/images/red-car.jpg"])
        assert result.score == 100
        assert result.status == "COMPLETED"
        assert result.passed

    def test_half_correct_is_attempted(self):
        result = score_exercise("WORD_RECOGNITION", COLOR_HUNT, ["/images/red-apple.jpg"])
        assert result.score == 50
        assert result.status == "ATTEMPTED"
        assert not result.passed

    def test_wrong_picks_do_not_count(self):
        result = score_exercise("WORD_RECOGNITION", COLOR_HUNT, ["/images/blue-ball.jpg"])
        assert result.score == 0

    def test_duplicate_answers_count_once(self):
        result = score_exercise("WORD_RECOGNITION", COLOR_HUNT, ["/images/red-car.jpg", "/images/red-car.jpg"])
        assert result.score == 50

    def test_no_correct_images(self):
        assert score_exercise("WORD_RECOGNITION", {"images": []}, ["x"]).score == 0
        assert score_exercise("WORD_RECOGNITION", {}, ["x"]).score == 0


class TestOtherTypes:
    def test_matching(self):
        assert score_exercise("MATCHING", {}, ["cat-meow"]).score == MATCHING_SCORE
        assert score_exercise("MATCHING", {}, []).score == 0

    @pytest.mark.parametrize("kind", ["PRONUNCIATION", "FILL_IN_BLANK", "STORY_TELLING"])
    def test_default_score(self, kind):
        result = score_exercise(kind, {}, ["answer"])
        assert result.score == DEFAULT_SCORE
        assert result.status == "COMPLETED"

    def test_empty_submission_is_attempted(self):
        result = score_exercise("PRONUNCIATION", {}, [])
        assert result.score == 0
        assert result.status == "ATTEMPTED"


def test_skipped_has_no_score():
    result = score_exercise("WORD_RECOGNITION", COLOR_HUNT, ["/images/red-car.jpg"], skipped=True)
    assert result.status == "SKIPPED"
    assert result.score is None
    assert not result.passed
