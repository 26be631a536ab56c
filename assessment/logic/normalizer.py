"""
Answer Normalizer

Converts raw answer payloads into canonical (zero-based index, answer) pairs.

Stored answers arrive in several shapes: mappings keyed "q1".."qN", mappings
keyed by plain numbers, or positional lists. Everything downstream of this
module only ever sees the canonical form.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

AnswerPair = Tuple[int, str]

MAX_KEY_DIGITS = 9


def parse_question_key(key: Any) -> Optional[int]:
    """
    Parse a question key into a zero-based index.

    "q1", "Q1", "1" and 1 all map to index 0.

    Returns:
        The zero-based index, or None when the key is malformed or negative
    """
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        number = key
    else:
        text = str(key).strip()
        if text[:1] in ("q", "Q"):
            text = text[1:].strip()
        # ASCII digits only; negative, signed and oversized keys are malformed
        if not (text.isascii() and text.isdigit()) or len(text) > MAX_KEY_DIGITS:
            return None
        number = int(text, 10)

    index = number - 1
    if index < 0:
        return None
    return index


def _coerce_answer(value: Any) -> Optional[str]:
    if value is None:
        return None
    answer = value if isinstance(value, str) else str(value)
    if answer == "":
        return None
    return answer


def normalize_answers(raw: Any) -> List[AnswerPair]:
    """
    Normalize a raw answer payload into (index, answer) pairs.

    Args:
        raw: Mapping of question keys to answers, a positional list/tuple, or None

    Returns:
        Pairs in input order. Malformed keys, None values and empty strings are dropped.
    """
    if raw is None:
        return []

    pairs: List[AnswerPair] = []

    if isinstance(raw, Mapping):
        for key, value in raw.items():
            index = parse_question_key(key)
            if index is None:
                logger.debug(f"Skipping malformed question key {key!r}")
                continue
            answer = _coerce_answer(value)
            if answer is None:
                continue
            pairs.append((index, answer))
        return pairs

    if isinstance(raw, (list, tuple)):
        for index, value in enumerate(raw):
            answer = _coerce_answer(value)
            if answer is None:
                continue
            pairs.append((index, answer))
        return pairs

    logger.debug(f"Ignoring unsupported answer payload of type {type(raw).__name__}")
    return pairs


def to_answer_map(pairs: Iterable[AnswerPair]) -> Dict[int, str]:
    """Collapse pairs into an index -> answer map. Later duplicates win."""
    answers: Dict[int, str] = {}
    for index, answer in pairs:
        answers[index] = answer
    return answers


def _row_field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def organize_sections(responses: Iterable[Any]) -> Dict[str, Any]:
    """
    Group stored response rows by section name.

    Rows may be dicts or ORM objects exposing ``section`` and ``answers``.
    A later row for the same section replaces an earlier one.
    """
    sections: Dict[str, Any] = {}
    for row in responses or []:
        section = _row_field(row, "section")
        if not section:
            continue
        sections[str(section)] = _row_field(row, "answers")
    return sections
