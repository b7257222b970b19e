"""
Tests for GoalLedger.
"""
import pytest

from eternal_quest.exceptions import (
    GoalIndexOutOfRangeException, ValidationException
)
from eternal_quest.modules.goals import create_goal
from eternal_quest.tests.conftest import make_ledger


class TestRecordEventAt:

    def test_one_based_index(self, ledger):
        """Index 1 should address the first goal added"""
        ledger.add(create_goal("Eternal", "Pray Daily"))
        ledger.add(create_goal("Simple", "Run a marathon"))

        goal, delta = ledger.record_event_at(2)

        assert goal.name == "Run a marathon"
        assert delta == 1000

    @pytest.mark.parametrize("index", [0, 3, -1])
    def test_out_of_range_leaves_ledger_unchanged(self, index):
        """Indices outside [1, len] should fail without touching any goal"""
        ledger = make_ledger(("Eternal", "Pray Daily", 0), ("Simple", "Run", 0))

        with pytest.raises(GoalIndexOutOfRangeException) as exc_info:
            ledger.record_event_at(index)

        assert exc_info.value.index == index
        assert isinstance(exc_info.value, ValidationException)
        assert ledger.total_score() == 0

    def test_empty_ledger(self, ledger):
        with pytest.raises(GoalIndexOutOfRangeException):
            ledger.record_event_at(1)


class TestTotalScore:

    def test_pray_daily_example(self, ledger):
        """Three events on a fresh eternal goal should total 300"""
        ledger.add(create_goal("Eternal", "Pray Daily", 0))
        for _ in range(3):
            ledger.record_event_at(1)

        assert ledger.total_score() == 300

    def test_penalties_reduce_total(self):
        ledger = make_ledger(("Simple", "Run", 1000), ("Penalty", "Junk food", 0))
        ledger.record_event_at(2)

        assert ledger.total_score() == 950

    def test_empty_ledger_scores_zero(self, ledger):
        assert ledger.total_score() == 0


class TestLedgerContents:

    def test_add_rejects_none(self, ledger):
        with pytest.raises(ValidationException):
            ledger.add(None)

    def test_duplicate_names_allowed(self):
        ledger = make_ledger(("Eternal", "Read", 0), ("Eternal", "Read", 0))
        assert len(ledger) == 2

    def test_display_all_numbers_goals(self):
        ledger = make_ledger(("Simple", "Run", 0), ("Eternal", "Pray Daily", 0))
        ledger.add(create_goal("Checklist", "Temple", 0, target_count=5))

        assert ledger.display_all() == [
            "1. [X] Run",
            "2. [ ] Pray Daily",
            "3. [ ] Temple (Completed 0/5 times)",
        ]

    def test_replace_keeps_new_order(self):
        ledger = make_ledger(("Simple", "Old", 0))
        ledger.replace([create_goal("Eternal", "A"), create_goal("Penalty", "B")])

        assert [g.name for g in ledger] == ["A", "B"]

    def test_goals_is_a_snapshot(self):
        ledger = make_ledger(("Simple", "Run", 0))
        ledger.goals.clear()
        assert len(ledger) == 1
