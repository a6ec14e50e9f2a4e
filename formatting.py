import re
from typing import Hashable, Iterable, Optional, TypeVar

from models import Period

T = TypeVar("T", bound=Hashable)

TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2}) (a|p)m")
TERM_CODE = re.compile(r"\d+")
SEMESTERS = {
    1: "Winter",
    2: "Spring",
    3: "Spring",
    5: "Summer",
    6: "Summer",
    8: "Fall",
    9: "Fall",
}


def string_to_time(string: str) -> int:
    """Parses "9:30 am" into minutes since midnight. Unparsable input gives 0."""
    match = TIME_PATTERN.search(string)
    if not match:
        return 0
    hour, minute, ampm = match.groups()
    return ((12 if ampm == "p" else 0) + int(hour) % 12) * 60 + int(minute)


def _clock(time: int) -> tuple[int, int]:
    hour = time // 60
    return hour, time % 60


def time_to_string(time: int, ampm: bool = True) -> str:
    hour, minute = _clock(time)
    hh = hour - 12 if hour > 12 else hour
    text = f"{hh}:{minute:02d}"
    if ampm:
        text += " am" if hour < 12 else " pm"
    return text


def time_to_short_string(time: int) -> str:
    hour, _ = _clock(time)
    hh = hour - 12 if hour > 12 else hour
    return f"{hh}{'a' if hour < 12 else 'p'}m"


def period_to_string(period: Optional[Period]) -> str:
    if period is None:
        return "TBA"
    return f"{time_to_string(period.start, ampm=False)} - {time_to_string(period.end)}"


def simplify_name(name: str) -> str:
    """Keeps only the first and last token of a full name."""
    tokens = name.split(" ")
    if len(tokens) == 1:
        return tokens[0]
    return f"{tokens[0]} {tokens[-1]}"


def unique(items: Iterable[T]) -> list[T]:
    return list(dict.fromkeys(items))


def get_semester_name(term: str) -> str:
    # Terms look like "202008": year followed by a month code
    year = term[:4]
    match = TERM_CODE.match(term[4:])
    semester = SEMESTERS.get(int(match.group()), "Unknown") if match else "Unknown"
    return f"{semester} {year}"


def humanize_array(items: Iterable, conjunction: str = "and") -> str:
    """["A", "B", "C"] -> "A, B, and C"."""
    items = [str(item) for item in items]
    if len(items) <= 2:
        return f" {conjunction} ".join(items)
    return f"{', '.join(items[:-1])}, {conjunction} {items[-1]}"
