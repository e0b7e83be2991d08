"""
Grade I final-rating lookup.

A Grade I ensemble receives three stage ratings (1-5). The final label is
looked up by the ratings sorted ascending and concatenated, e.g. [3, 2, 1]
-> "123" -> "II".
"""

from __future__ import annotations

from collections.abc import Iterable

GRADE_ONE_MAP: dict[str, str] = {
    "111": "I",
    "112": "I",
    "113": "I",
    "114": "I",
    "115": "I",
    "122": "II",
    "123": "II",
    "222": "II",
    "223": "II",
    "224": "II",
    "225": "II",
    "133": "III",
    "234": "III",
    "332": "III",
    "333": "III",
    "334": "III",
    "335": "III",
    "144": "IV",
    "345": "IV",
    "442": "IV",
    "443": "IV",
    "444": "IV",
    "445": "IV",
    "155": "V",
    "255": "V",
    "355": "V",
    "455": "V",
    "555": "V",
}


def compute_grade_one_key(values: Iterable[int]) -> str:
    return "".join(str(v) for v in sorted(int(v) for v in values))


def lookup_grade_one_rating(values: Iterable[int]) -> str | None:
    return GRADE_ONE_MAP.get(compute_grade_one_key(values))
