from __future__ import annotations

import csv
import io
import re

from .model import AttendanceReport

DAILY_FIELDS = [
    "date",
    "possible_attendance",
    "actual_attendance",
    "absent_count",
    "attendance_rate",
    "absent_students",
]


def daily_metrics_csv(report: AttendanceReport) -> bytes:
    """Daily metrics as CSV bytes (UTF-8 with BOM so spreadsheets detect it)."""

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=DAILY_FIELDS)
    writer.writeheader()
    for day in report.daily_metrics:
        row = day.to_dict()
        row["absent_students"] = "; ".join(
            f"{s.student_number} {s.surname} {s.name}".strip() for s in day.absent_students
        )
        writer.writerow(row)

    return out.getvalue().encode("utf-8-sig")


def report_csv_filename(report: AttendanceReport) -> str:
    start = report.report_period.start_date.replace("-", "") or "all"
    end = report.report_period.end_date.replace("-", "") or "all"
    class_slug = re.sub(r"[^A-Za-z0-9_-]+", "_", report.class_name)
    return f"attendance_{class_slug}_T{report.term_num}_{report.year}_{start}_{end}.csv"
