from enum import IntFlag, StrEnum
from typing import Annotated, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, model_validator

MINUTES_PER_DAY = 24 * 60


class Day(IntFlag):
    MON = 1
    TUE = 2
    WED = 4
    THU = 8
    FRI = 16
    SAT = 32
    SUN = 64

    @classmethod
    def parse(cls, codes: Union[str, Iterable[str], int, "Day"]) -> "Day":
        """Builds a day set from registrar codes ("MWF"), names or a bitmask."""
        if isinstance(codes, int):
            return cls(codes)
        if isinstance(codes, str):
            codes = [codes] if codes in DAY_NAMES else list(codes)
        if not isinstance(codes, Iterable):
            raise ValueError(f"Expected day codes, got {codes!r}")
        days = cls(0)
        for code in codes:
            if isinstance(code, cls):
                days |= code
            elif code in DAY_CODES:
                days |= DAY_CODES[code]
            elif code in DAY_NAMES:
                days |= DAY_NAMES[code]
            elif not isinstance(code, str) or code.strip():
                raise ValueError(f"Unknown day code: {code!r}")
        return days


DAYS = (Day.MON, Day.TUE, Day.WED, Day.THU, Day.FRI, Day.SAT, Day.SUN)
WEEKDAYS = DAYS[:5]
DAY_CODES = dict(zip("MTWRFSU", DAYS))
DAY_NAMES = dict(zip(("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"), DAYS))


class Period(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0, le=MINUTES_PER_DAY)  # minutes since midnight
    end: int = Field(ge=0, le=MINUTES_PER_DAY)

    @model_validator(mode="after")
    def check_order(self) -> "Period":
        if self.start >= self.end:
            raise ValueError("Period start must be before end")
        return self

    @property
    def duration(self) -> int:
        return self.end - self.start


class Meeting(BaseModel):
    model_config = ConfigDict(frozen=True)

    days: Annotated[Day, PlainValidator(Day.parse)] = Day(0)
    # None means the meeting time is to be announced
    period: Optional[Period] = None


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    meetings: list[Meeting] = Field(default_factory=list)
    schedule_type: str = ""
    crn: str = ""
    course: str = ""
    instructors: list[str] = Field(default_factory=list)

    @property
    def label(self) -> str:
        return " ".join(part for part in (self.course, self.crn) if part)


class Operator(StrEnum):
    AND = "and"
    OR = "or"


class Leaf(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


class Compound(BaseModel):
    model_config = ConfigDict(frozen=True)

    operator: Operator
    # Order is preserved in the serialized text
    children: tuple[Union[Leaf, "Compound"], ...] = ()


type Clause = Leaf | Compound
