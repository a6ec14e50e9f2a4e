import json
import os
from typing import Any

from pydantic import ValidationError

from models import Clause, Compound, Leaf, Operator, Section

type RawClause = dict[str, Any] | list[Any] | Clause


def parse_clause(raw: RawClause) -> Clause:
    """Builds a clause from {"id": ...} leaves and ["and"|"or", ...] groups."""
    if isinstance(raw, (Leaf, Compound)):
        return raw
    if isinstance(raw, dict):
        if "id" not in raw:
            raise ValueError(f"Prerequisite leaf without an id: {raw!r}")
        return Leaf(id=raw["id"])
    if isinstance(raw, list) and raw:
        operator, *children = raw
        if operator not in (Operator.AND, Operator.OR):
            raise ValueError(f"Unknown prerequisite operator: {operator!r}")
        return Compound(
            operator=Operator(operator),
            children=tuple(parse_clause(child) for child in children),
        )
    raise ValueError(f"Malformed prerequisite clause: {raw!r}")


def _read_json(file_path: str) -> dict[str, Any]:
    if not os.path.exists(file_path):
        print(f"Error: File '{file_path}' not found.")
        return {}
    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            print(f"Error: File '{file_path}' is not valid JSON: {e}")
            return {}
    if not isinstance(data, dict):
        print(f"Error: File '{file_path}' must hold a JSON object.")
        return {}
    return data


def load_sections(file_path: str) -> dict[str, Section]:
    """Reads {crn: section} JSON. Invalid sections are reported and skipped."""
    data = _read_json(file_path)

    sections = {}
    for crn, raw in data.items():
        if not isinstance(raw, dict):
            print(f"Failed to load section {crn}: expected an object, got {raw!r}")
            continue
        try:
            sections[crn] = Section.model_validate({"crn": crn, **raw})
        except ValidationError as e:
            print(f"Failed to load section {crn}: {e}")
    return sections


def load_prereqs(file_path: str) -> dict[str, Clause]:
    """Reads {course_id: clause} JSON. Courses with an empty clause are skipped."""
    data = _read_json(file_path)

    prereqs = {}
    for course_id, raw in data.items():
        if not raw:
            continue
        try:
            prereqs[course_id] = parse_clause(raw)
        except (ValueError, ValidationError) as e:
            print(f"Failed to load prerequisites for {course_id}: {e}")
    return prereqs


if __name__ == "__main__":
    from prereqs import serialize_prereqs

    for course_id, clause in load_prereqs("data/prereqs.json").items():
        print(f"{course_id}: {serialize_prereqs(clause)}")
