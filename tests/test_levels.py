"""Tests for age and known-word-count level bucketing."""

from datetime import date, datetime

import pytest

from speech_companion.levels import (
    LEVEL_INFO,
    InvalidInput,
    LevelSource,
    age_in_months,
    level_from_age,
    level_from_known_word_count,
    level_label,
    parse_date,
    validate_level,
)


NOW = date(2026, 10, 19)


def born_months_before(now: date, months: int) -> date:
    total = now.year * 12 + (now.month - 1) - months
    return date(total // 12, total % 12 + 1, 1)


class TestAgeInMonths:
    """Calendar-month age arithmetic."""

    def test_day_of_month_is_ignored(self):
        assert age_in_months(date(2026, 9, 30), date(2026, 10, 1)) == 1
        assert age_in_months(date(2026, 9, 1), date(2026, 10, 31)) == 1

    def test_year_rollover(self):
        assert age_in_months(date(2025, 11, 20), date(2026, 2, 3)) == 3

    def test_accepts_iso_strings_and_datetimes(self):
        assert age_in_months("2025-10-19", datetime(2026, 10, 19, 12, 0)) == 12

    def test_future_birth_date_is_negative(self):
        assert age_in_months(date(2027, 1, 1), NOW) < 0


class TestLevelFromAge:
    """Four fixed age bands."""

    @pytest.mark.parametrize(
        "months,expected",
        [(0, 0), (17, 0), (18, 1), (23, 1), (24, 2), (35, 2), (36, 3), (200, 3)],
    )
    def test_boundaries(self, months, expected):
        assert level_from_age(born_months_before(NOW, months), NOW) == expected

    def test_born_ten_months_ago(self):
        assert level_from_age(born_months_before(NOW, 10), NOW) == 0

    def test_born_twenty_months_ago(self):
        assert level_from_age(born_months_before(NOW, 20), NOW) == 1

    def test_future_birth_date_gives_level_zero(self):
        assert level_from_age(date(2027, 3, 1), NOW) == 0

    def test_defaults_to_today(self):
        assert level_from_age(date(1990, 1, 1)) == 3

    def test_idempotent_and_does_not_mutate_input(self):
        born = date(2024, 8, 5)
        first = level_from_age(born, NOW)
        second = level_from_age(born, NOW)
        assert first == second == 2
        assert born == date(2024, 8, 5)

    @pytest.mark.parametrize(
        "bad",
        ["", "not-a-date", "2024-13-01", "2024-02-30", "2024-01-01garbage", "2024-01-01T99:99", "2024-01-01 not a date"],
    )
    def test_unparseable_strings_are_rejected(self, bad):
        with pytest.raises(InvalidInput):
            level_from_age(bad, NOW)

    @pytest.mark.parametrize("bad", [None, 12, 3.5, ["2024-01-01"]])
    def test_non_dates_are_rejected(self, bad):
        with pytest.raises(InvalidInput):
            level_from_age(bad, NOW)

    def test_invalid_input_is_a_value_error(self):
        with pytest.raises(ValueError):
            level_from_age("nope", NOW)


class TestLevelFromKnownWordCount:
    """Four fixed vocabulary-size bands."""

    @pytest.mark.parametrize(
        "count,expected",
        [(0, 0), (9, 0), (10, 1), (49, 1), (50, 2), (199, 2), (200, 3), (5000, 3)],
    )
    def test_boundaries(self, count, expected):
        assert level_from_known_word_count(count) == expected

    def test_fifty_five_words(self):
        assert level_from_known_word_count(55) == 2

    def test_idempotent(self):
        assert level_from_known_word_count(77) == level_from_known_word_count(77)

    def test_monotonic_in_count(self):
        levels = [level_from_known_word_count(c) for c in range(0, 260)]
        assert levels == sorted(levels)

    @pytest.mark.parametrize("bad", [-1, -100])
    def test_negative_counts_are_rejected(self, bad):
        with pytest.raises(InvalidInput):
            level_from_known_word_count(bad)

    @pytest.mark.parametrize("bad", [1.5, "10", None, True])
    def test_non_integers_are_rejected(self, bad):
        with pytest.raises(InvalidInput):
            level_from_known_word_count(bad)


class TestLevelHelpers:
    def test_every_result_is_a_known_level(self):
        results = {level_from_known_word_count(c) for c in range(0, 300)}
        results |= {level_from_age(born_months_before(NOW, m), NOW) for m in range(0, 120)}
        assert results == set(LEVEL_INFO)

    def test_labels(self):
        assert level_label(2) == "Level 2: Word Combinations"
        assert level_label(7) == "Unknown"

    def test_validate_level(self):
        assert validate_level(0) == 0
        assert validate_level(3) == 3
        for bad in (-1, 4, True, "2", 1.0):
            with pytest.raises(InvalidInput):
                validate_level(bad)

    def test_level_source_values(self):
        assert LevelSource.AGE.value == "age"
        assert LevelSource.VOCABULARY_SIZE.value == "vocabulary_size"
        assert LevelSource.MANUAL_OVERRIDE.value == "manual_override"

    def test_parse_date_keeps_dates(self):
        assert parse_date(date(2025, 5, 4)) == date(2025, 5, 4)
        assert parse_date(datetime(2025, 5, 4, 8, 30)) == date(2025, 5, 4)
        assert parse_date(" 2025-05-04 ") == date(2025, 5, 4)

    def test_parse_date_accepts_full_timestamps(self):
        assert parse_date("2025-05-04T08:30:00") == date(2025, 5, 4)
        assert parse_date("2025-05-04T08:30:00.000Z") == date(2025, 5, 4)
