"""
Goal file codec.

One record per line, ``Tag|name|points``, UTF-8, newline-terminated, no
header. Only the variant, name and points are stored: a checklist goal comes
back with the default target and no completed events.
"""
import logging
import re
from pathlib import Path
from typing import Iterable, List, NamedTuple, Union

from eternal_quest.constants import (
    RECORD_SEPARATOR,
    RECORD_FIELD_COUNT,
    RECORD_ENCODING,
)
from eternal_quest.exceptions import (
    ValidationException,
    GoalFileNotFoundException,
    GoalFileIOException,
    UnknownVariantException,
)
from .models import Goal, GoalVariant

logger = logging.getLogger("eternal_quest.codec")

PathLike = Union[str, Path]

_INTEGER_FIELD = re.compile(r"^\s*[+-]?[0-9]+\s*$")


class SkippedLine(NamedTuple):
    """A malformed record that was left out of a load"""
    line_number: int
    content: str
    reason: str


class LoadReport(NamedTuple):
    """Goals read from a file, in file order, plus the lines that were skipped"""
    goals: List[Goal]
    skipped: List[SkippedLine]


def encode_goal(goal: Goal) -> str:
    """Single record line for a goal, without the trailing newline"""
    return RECORD_SEPARATOR.join(
        [goal.variant.record_tag, goal.name, str(goal.points)]
    )


def save(goals: Iterable[Goal], destination: PathLike) -> int:
    """
    Write goals to destination, replacing any existing content.

    Returns:
        Number of records written

    Raises:
        GoalFileIOException: destination cannot be opened or written
    """
    count = 0
    try:
        with open(destination, "w", encoding=RECORD_ENCODING, newline="\n") as f:
            for goal in goals:
                f.write(encode_goal(goal) + "\n")
                count += 1
    except (OSError, ValueError) as e:
        # ValueError: paths open() refuses outright, e.g. an embedded NUL
        logger.error(f"Error saving goals to {destination!r}: {e}")
        raise GoalFileIOException("write", str(destination), getattr(e, "strerror", None) or str(e))

    logger.info(f"Saved {count} goals to {destination}")
    return count


def decode_line(line: str, line_number: int) -> Goal:
    """
    Parse one record line.

    Raises:
        ValidationException: wrong field count, non-integer points, or a
            record that breaks a goal invariant (the line is skippable)
        UnknownVariantException: well-formed line with an unknown type tag
    """
    fields = line.split(RECORD_SEPARATOR)
    if len(fields) != RECORD_FIELD_COUNT:
        raise ValidationException(
            "record", f"expected {RECORD_FIELD_COUNT} fields, got {len(fields)}"
        )

    tag, name, raw_points = fields
    if not _INTEGER_FIELD.match(raw_points):
        raise ValidationException("points", f"invalid points for goal '{name}'")
    points = int(raw_points)

    variant = GoalVariant.from_record_tag(tag)
    if variant is None:
        raise UnknownVariantException(tag, line_number)

    return Goal(variant, name, points)


def load(source: PathLike) -> LoadReport:
    """
    Read goals from source.

    Malformed lines are skipped and reported; an unknown type tag aborts
    the whole load.

    Raises:
        GoalFileNotFoundException: source does not exist
        GoalFileIOException: source cannot be read or decoded
        UnknownVariantException: a record names an unknown goal type
    """
    path = Path(source)
    if not path.exists():
        logger.info(f"No saved goals found at {path}")
        raise GoalFileNotFoundException(str(path))

    goals: List[Goal] = []
    skipped: List[SkippedLine] = []

    try:
        with open(path, "r", encoding=RECORD_ENCODING, newline="") as f:
            for line_number, raw in enumerate(f, start=1):
                line = raw.rstrip("\r\n")
                try:
                    goals.append(decode_line(line, line_number))
                except ValidationException as e:
                    logger.warning(f"Skipping line {line_number} of {path}: {e}")
                    skipped.append(SkippedLine(line_number, line, str(e)))
    except FileNotFoundError:
        raise GoalFileNotFoundException(str(path))
    except UnicodeDecodeError as e:
        logger.error(f"Error loading goals from {path}: {e}")
        raise GoalFileIOException("read", str(path), str(e))
    except (OSError, ValueError) as e:
        logger.error(f"Error loading goals from {path!r}: {e}")
        raise GoalFileIOException("read", str(path), getattr(e, "strerror", None) or str(e))

    logger.info(f"Loaded {len(goals)} goals from {path} ({len(skipped)} skipped)")
    return LoadReport(goals, skipped)
