from itertools import combinations

from tqdm import tqdm

from models import Meeting, Section

LAB_TYPES = ("Lab", "Studio")


def meetings_overlap(m1: Meeting, m2: Meeting) -> bool:
    """Half-open overlap on a shared day. TBA meetings never overlap."""
    if m1.period is None or m2.period is None:
        return False
    if not m1.days & m2.days:
        return False
    return m1.period.start < m2.period.end and m2.period.start < m1.period.end


def has_conflict(a: Section, b: Section) -> bool:
    for m1 in a.meetings:
        for m2 in b.meetings:
            if meetings_overlap(m1, m2):
                return True
    return False


def is_lab(section: Section) -> bool:
    return any(t in section.schedule_type for t in LAB_TYPES)


def is_lecture(section: Section) -> bool:
    return "Lecture" in section.schedule_type


def find_conflicts(
    sections: list[Section], progress: bool = False
) -> list[tuple[Section, Section]]:
    """Returns every clashing pair of sections, in combination order."""
    pairs = combinations(sections, 2)
    if progress:
        total = len(sections) * (len(sections) - 1) // 2
        pairs = tqdm(pairs, total=total, desc="Checking conflicts", unit="pair")

    clashes = []
    for a, b in pairs:
        if has_conflict(a, b):
            clashes.append((a, b))
    return clashes
