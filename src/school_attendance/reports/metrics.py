"""Attendance analytics pipeline: records -> daily -> weekly -> trends.

Every function here is pure: it takes finished values and returns new frozen
values, so each stage can be tested on its own.
"""
from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import week_start
from ..core.constants import DAYS_PER_WEEK, RATE_QUANTUM, TREND_DECLINING_THRESHOLD, TREND_IMPROVING_THRESHOLD
from ..core.enums import TrendLabel
from ..enrolment.model import StudentSummary
from .model import (
    AttendanceTrend,
    ClassAttendanceSummary,
    DailyAttendanceMetrics,
    OverallStats,
    StudentAttendanceStats,
    WeeklyAttendanceSummary,
)


def round2(value: Decimal | float | int) -> float:
    """Round half-up to two decimals."""
    return float(Decimal(str(value)).quantize(RATE_QUANTUM, rounding=ROUND_HALF_UP))


def attendance_rate(actual: int, possible: int) -> float:
    """Percentage of ``actual`` over ``possible``; 0 when nothing was possible."""
    if possible <= 0:
        return 0.0
    return round2(Decimal(actual) * 100 / Decimal(possible))


def build_daily_metrics(records: Iterable[AttendanceRecord], total_students: int) -> list[DailyAttendanceMetrics]:
    """Group records by calendar date and count presence per day.

    Records without a loaded student are dropped; every other record counts,
    including students who have since left the roster. ``total_students`` is
    the current roster size, used as possible attendance for every day.
    """

    by_date: dict[date, list[AttendanceRecord]] = defaultdict(list)
    for r in records:
        if r.student is None:
            continue
        by_date[r.date].append(r)

    metrics: list[DailyAttendanceMetrics] = []
    for day in sorted(by_date):
        day_records = by_date[day]
        present = sum(1 for r in day_records if r.present)
        absent = tuple(r.student for r in day_records if not r.present)
        metrics.append(
            DailyAttendanceMetrics(
                date=day,
                possible_attendance=total_students,
                actual_attendance=present,
                absent_count=len(absent),
                attendance_rate=attendance_rate(present, total_students),
                absent_students=absent,
            )
        )
    return metrics


def build_weekly_summaries(daily_metrics: Sequence[DailyAttendanceMetrics]) -> list[WeeklyAttendanceSummary]:
    """Roll daily metrics into Monday-anchored weeks, numbered from 1."""

    weeks: dict[date, list[DailyAttendanceMetrics]] = defaultdict(list)
    for day in daily_metrics:
        weeks[week_start(day.date)].append(day)

    summaries: list[WeeklyAttendanceSummary] = []
    for number, start in enumerate(sorted(weeks), start=1):
        days = weeks[start]
        possible = sum(d.possible_attendance for d in days)
        actual = sum(d.actual_attendance for d in days)
        summaries.append(
            WeeklyAttendanceSummary(
                week_start_date=start,
                week_end_date=start + timedelta(days=DAYS_PER_WEEK - 1),
                week_number=number,
                total_possible_attendance=possible,
                total_actual_attendance=actual,
                average_attendance_rate=attendance_rate(actual, possible),
                days_with_attendance=len(days),
            )
        )
    return summaries


def classify_trend(previous_rate: float, current_rate: float) -> TrendLabel:
    diff = Decimal(str(current_rate)) - Decimal(str(previous_rate))
    if diff > TREND_IMPROVING_THRESHOLD:
        return TrendLabel.IMPROVING
    if diff < TREND_DECLINING_THRESHOLD:
        return TrendLabel.DECLINING
    return TrendLabel.STABLE


def classify_trends(weekly_summaries: Sequence[WeeklyAttendanceSummary]) -> list[AttendanceTrend]:
    """Label each week against the previous one; needs at least two weeks."""

    if len(weekly_summaries) < 2:
        return []

    trends: list[AttendanceTrend] = []
    previous: Optional[WeeklyAttendanceSummary] = None
    for week in weekly_summaries:
        label = TrendLabel.STABLE
        if previous is not None:
            label = classify_trend(previous.average_attendance_rate, week.average_attendance_rate)
        trends.append(
            AttendanceTrend(
                period=f"Week {week.week_number}",
                attendance_rate=week.average_attendance_rate,
                trend=label,
            )
        )
        previous = week
    return trends


def build_overall_stats(daily_metrics: Sequence[DailyAttendanceMetrics]) -> OverallStats:
    possible = sum(d.possible_attendance for d in daily_metrics)
    actual = sum(d.actual_attendance for d in daily_metrics)
    return OverallStats(
        total_possible_attendance=possible,
        total_actual_attendance=actual,
        overall_attendance_rate=attendance_rate(actual, possible),
        total_days_marked=len(daily_metrics),
    )


def summarize_class(
    records: Iterable[AttendanceRecord],
    *,
    class_name: str,
    term_num: int,
    year: int,
) -> ClassAttendanceSummary:
    """Record counts for a class plus per-student presence stats."""

    counted = [r for r in records if r.student is not None]
    present_count = sum(1 for r in counted if r.present)

    per_student: dict[str, list[AttendanceRecord]] = defaultdict(list)
    students: dict[str, StudentSummary] = {}
    for r in counted:
        per_student[r.student.student_number].append(r)
        students.setdefault(r.student.student_number, r.student)

    stats = []
    for number, rows in per_student.items():
        present_days = sum(1 for r in rows if r.present)
        stats.append(
            StudentAttendanceStats(
                student=students[number],
                total_days=len(rows),
                present_days=present_days,
                absent_days=len(rows) - present_days,
                attendance_rate=attendance_rate(present_days, len(rows)),
            )
        )
    stats.sort(key=lambda s: (s.student.surname, s.student.name, s.student.student_number))

    return ClassAttendanceSummary(
        class_name=class_name,
        term_num=term_num,
        year=year,
        total_records=len(counted),
        present_count=present_count,
        absent_count=len(counted) - present_count,
        attendance_rate=attendance_rate(present_count, len(counted)),
        student_stats=tuple(stats),
    )
