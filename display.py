from tabulate import tabulate

from conflicts import find_conflicts
from formatting import period_to_string, time_to_string
from models import DAY_NAMES, Section

# Grid spans 8:00 to 22:00 in half-hour slots
DAY_START = 8 * 60
DAY_END = 22 * 60
SLOT_MINUTES = 30


def timetable_rows(sections: list[Section]) -> list[list[str]]:
    """One row per slot, one column per weekday; cells name the sections meeting then."""
    rows = []
    for slot in range(DAY_START, DAY_END, SLOT_MINUTES):
        row = [time_to_string(slot)]
        for day in DAY_NAMES.values():
            labels = []
            for section in sections:
                for meeting in section.meetings:
                    period = meeting.period
                    if period is None or not meeting.days & day:
                        continue
                    if period.start < slot + SLOT_MINUTES and slot < period.end:
                        labels.append(f"{section.label}\n({section.schedule_type})")
                        break
            row.append("\n".join(labels))
        rows.append(row)
    return rows


def display_timetable(sections: list[Section]):
    headers = ["Time"] + list(DAY_NAMES)
    print(
        tabulate(
            timetable_rows(sections),
            headers=headers,
            tablefmt="grid",
            stralign="center",
        )
    )


def display_conflicts(sections: list[Section], progress: bool = False):
    clashes = find_conflicts(sections, progress=progress)
    if not clashes:
        print("No conflicts found.")
        return

    table = []
    for a, b in clashes:
        table.append(
            [
                a.label,
                ", ".join(period_to_string(m.period) for m in a.meetings),
                b.label,
                ", ".join(period_to_string(m.period) for m in b.meetings),
            ]
        )
    headers = ["Section", "Times", "Clashes with", "Times"]
    print(tabulate(table, headers=headers, tablefmt="grid"))


if __name__ == "__main__":
    from load import load_sections

    all_sections = list(load_sections("data/sections.json").values())
    display_timetable(all_sections)
    display_conflicts(all_sections, progress=True)
