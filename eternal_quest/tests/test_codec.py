"""
Tests for the goal file codec.

Tests cover:
1. Record layout on save
2. Round-trip of simple, eternal and penalty goals
3. Skipping malformed lines
4. Unknown type tags aborting the load
5. Missing files and unwritable destinations
"""
import logging

import pytest

from eternal_quest.exceptions import (
    GoalFileIOException,
    GoalFileNotFoundException,
    UnknownVariantException,
)
from eternal_quest.modules.goals import codec, create_goal
from eternal_quest.modules.goals.models import GoalVariant
from eternal_quest.tests.conftest import make_ledger, write_goal_file


def triples(goals):
    return [(g.variant, g.name, g.points) for g in goals]


class TestSave:

    def test_record_layout(self, goals_file):
        """Each goal should be one Tag|name|points line with a trailing newline"""
        ledger = make_ledger(
            ("Simple", "Run a marathon", 1000),
            ("Eternal", "Pray Daily", 300),
            ("Penalty", "Junk food", -50),
        )
        ledger.add(create_goal("Checklist", "Temple", 100, target_count=3))

        count = codec.save(ledger.goals, goals_file)

        assert count == 4
        assert goals_file.read_text(encoding="utf-8") == (
            "SimpleGoal|Run a marathon|1000\n"
            "EternalGoal|Pray Daily|300\n"
            "PenaltyGoal|Junk food|-50\n"
            "ChecklistGoal|Temple|100\n"
        )

    def test_overwrites_existing_content(self, goals_file):
        write_goal_file(goals_file, "EternalGoal|Old|1", "EternalGoal|Older|2")

        codec.save([create_goal("Simple", "New", 0)], goals_file)

        assert goals_file.read_text(encoding="utf-8") == "SimpleGoal|New|0\n"

    def test_empty_ledger_writes_empty_file(self, goals_file):
        codec.save([], goals_file)
        assert goals_file.read_text(encoding="utf-8") == ""

    def test_unwritable_destination(self, tmp_path):
        """A destination that cannot be opened should raise an IO failure"""
        destination = tmp_path / "missing_dir" / "goals.txt"

        with pytest.raises(GoalFileIOException) as exc_info:
            codec.save([create_goal("Simple", "Run", 0)], destination)

        assert exc_info.value.operation == "write"
        assert exc_info.value.details


class TestRoundTrip:

    def test_simple_eternal_penalty_round_trip(self, goals_file):
        """Save then load should reproduce (variant, name, points) in order"""
        ledger = make_ledger(
            ("Eternal", "Pray Daily", 0),
            ("Simple", "Run a marathon", 0),
            ("Penalty", "Junk food", 0),
            ("Eternal", "Scripture study", 700),
        )
        ledger.record_event_at(1)
        ledger.record_event_at(2)
        ledger.record_event_at(3)

        codec.save(ledger.goals, goals_file)
        report = codec.load(goals_file)

        assert triples(report.goals) == triples(ledger.goals)
        assert report.skipped == []

    def test_unicode_names_round_trip(self, goals_file):
        ledger = make_ledger(("Eternal", "Leer la Biblia ✓", 100))
        codec.save(ledger.goals, goals_file)

        assert triples(codec.load(goals_file).goals) == triples(ledger.goals)

    def test_checklist_progress_is_not_persisted(self, goals_file):
        """Reloaded checklists should come back with target 10 and no progress"""
        goal = create_goal("Checklist", "Temple", 0, target_count=2)
        goal.record_event()
        goal.record_event()

        codec.save([goal], goals_file)
        (loaded,) = codec.load(goals_file).goals

        assert loaded.points == 600
        assert loaded.target_count == 10
        assert loaded.completed_count == 0
        assert loaded.is_complete() is False


class TestLoadMalformedLines:

    def test_wrong_field_count_skipped(self, goals_file, caplog):
        """A line with the wrong field count should be skipped with a diagnostic"""
        write_goal_file(
            goals_file,
            "SimpleGoal|Run|1000",
            "EternalGoal|Pray Daily",
            "PenaltyGoal|Junk food|-100",
        )

        with caplog.at_level(logging.WARNING, logger="eternal_quest.codec"):
            report = codec.load(goals_file)

        assert triples(report.goals) == [
            (GoalVariant.SIMPLE, "Run", 1000),
            (GoalVariant.PENALTY, "Junk food", -100),
        ]
        assert [s.line_number for s in report.skipped] == [2]
        assert "Skipping line 2" in caplog.text

    def test_non_ascii_digits_skipped(self, goals_file):
        """Only ASCII digits count as points; other Unicode digits are malformed"""
        write_goal_file(goals_file, "EternalGoal|Pray|٣٠٠", "EternalGoal|Read|300")

        report = codec.load(goals_file)

        assert triples(report.goals) == [(GoalVariant.ETERNAL, "Read", 300)]
        assert [s.line_number for s in report.skipped] == [1]

    def test_non_integer_points_skipped(self, goals_file):
        write_goal_file(goals_file, "EternalGoal|Pray|lots", "EternalGoal|Read|200")

        report = codec.load(goals_file)

        assert [g.name for g in report.goals] == ["Read"]
        assert report.skipped[0].content == "EternalGoal|Pray|lots"

    def test_pipe_in_name_corrupts_only_its_line(self, goals_file):
        """A name containing the separator is written verbatim and skipped on reload"""
        ledger = make_ledger(("Eternal", "Read | Write", 0), ("Simple", "Run", 0))
        codec.save(ledger.goals, goals_file)

        report = codec.load(goals_file)

        assert [g.name for g in report.goals] == ["Run"]
        assert len(report.skipped) == 1

    def test_blank_line_skipped(self, goals_file):
        write_goal_file(goals_file, "SimpleGoal|Run|0", "", "EternalGoal|Pray|0")

        report = codec.load(goals_file)

        assert len(report.goals) == 2
        assert [s.line_number for s in report.skipped] == [2]

    def test_negative_points_on_non_penalty_skipped(self, goals_file):
        write_goal_file(goals_file, "SimpleGoal|Run|-5", "PenaltyGoal|Junk|-5")

        report = codec.load(goals_file)

        assert [g.name for g in report.goals] == ["Junk"]

    def test_malformed_line_with_unknown_tag_is_skipped(self, goals_file):
        """Field checks run before the tag check, so a malformed unknown line is skippable"""
        write_goal_file(goals_file, "WeeklyGoal|Call mom", "SimpleGoal|Run|0")

        report = codec.load(goals_file)

        assert [g.name for g in report.goals] == ["Run"]


class TestLoadFailures:

    def test_unknown_variant_aborts_load(self, goals_file):
        """An unknown type tag should fail the whole load"""
        write_goal_file(
            goals_file,
            "SimpleGoal|Run|1000",
            "WeeklyGoal|Call mom|100",
            "EternalGoal|Pray|0",
        )

        with pytest.raises(UnknownVariantException) as exc_info:
            codec.load(goals_file)

        assert exc_info.value.tag == "WeeklyGoal"
        assert exc_info.value.line_number == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(GoalFileNotFoundException):
            codec.load(tmp_path / "nope.txt")

    def test_null_byte_path_is_io_failure_on_save(self):
        """Paths open() rejects outright should still be IO failures"""
        with pytest.raises(GoalFileIOException) as exc_info:
            codec.save([create_goal("Simple", "Run", 0)], "bad\0path.txt")

        assert exc_info.value.operation == "write"

    def test_null_byte_path_does_not_escape_load(self):
        with pytest.raises((GoalFileNotFoundException, GoalFileIOException)):
            codec.load("bad\0path.txt")

    def test_directory_is_io_failure(self, tmp_path):
        with pytest.raises(GoalFileIOException):
            codec.load(tmp_path)

    def test_undecodable_file_is_io_failure(self, goals_file):
        goals_file.write_bytes(b"SimpleGoal|\xff\xfe|10\n")

        with pytest.raises(GoalFileIOException) as exc_info:
            codec.load(goals_file)

        assert exc_info.value.operation == "read"

    def test_windows_line_endings_accepted(self, goals_file):
        goals_file.write_bytes(b"SimpleGoal|Run|1000\r\nEternalGoal|Pray|100\r\n")

        report = codec.load(goals_file)

        assert triples(report.goals) == [
            (GoalVariant.SIMPLE, "Run", 1000),
            (GoalVariant.ETERNAL, "Pray", 100),
        ]
