"""Sequential roll numbers per (class, section).

A roll number is ``<year code><program code><section><sequence>``, where the
year code is the last two characters of the class label and the sequence is
zero-padded to three digits: class ``23``, section ``A`` gives ``23SWA001``.
"""
from typing import Optional

from app.core.config import settings

SEQUENCE_WIDTH = 3


def roll_number_prefix(class_name: str, section: str, program_code: Optional[str] = None) -> str:
    code = settings.ROLL_NUMBER_PROGRAM_CODE if program_code is None else program_code
    return f"{class_name[-2:]}{code}{section}"


def parse_sequence(roll_number: str, prefix: str) -> Optional[int]:
    """Return the numeric part after the first ``len(prefix)`` characters, or None."""
    suffix = roll_number[len(prefix):]
    if not (suffix.isascii() and suffix.isdigit()):
        return None
    return int(suffix)


def next_roll_number(
    class_name: str,
    section: str,
    last_roll_number: Optional[str],
    program_code: Optional[str] = None,
) -> str:
    """Build the roll number that follows ``last_roll_number``.

    ``last_roll_number`` is the greatest existing roll number in the class and
    section, or None for an empty roster. An unparseable suffix restarts the
    sequence at 1; the unique index on roll_number rejects the clash if that
    number is already taken.
    """
    prefix = roll_number_prefix(class_name, section, program_code)
    sequence = 1
    if last_roll_number:
        last_sequence = parse_sequence(last_roll_number, prefix)
        if last_sequence is not None:
            sequence = last_sequence + 1
    return f"{prefix}{sequence:0{SEQUENCE_WIDTH}d}"
