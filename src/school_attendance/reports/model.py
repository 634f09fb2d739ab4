from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..common.datetime_utils import iso
from ..core.enums import TrendLabel
from ..enrolment.model import StudentSummary


@dataclass(frozen=True)
class DailyAttendanceMetrics:
    date: date
    possible_attendance: int
    actual_attendance: int
    absent_count: int
    attendance_rate: float
    absent_students: tuple[StudentSummary, ...] = ()

    def to_dict(self) -> dict:
        return {
            "date": iso(self.date),
            "possible_attendance": self.possible_attendance,
            "actual_attendance": self.actual_attendance,
            "absent_count": self.absent_count,
            "attendance_rate": self.attendance_rate,
            "absent_students": [s.to_dict() for s in self.absent_students],
        }


@dataclass(frozen=True)
class WeeklyAttendanceSummary:
    week_start_date: date
    week_end_date: date
    week_number: int
    total_possible_attendance: int
    total_actual_attendance: int
    average_attendance_rate: float
    days_with_attendance: int

    def to_dict(self) -> dict:
        return {
            "week_start_date": iso(self.week_start_date),
            "week_end_date": iso(self.week_end_date),
            "week_number": self.week_number,
            "total_possible_attendance": self.total_possible_attendance,
            "total_actual_attendance": self.total_actual_attendance,
            "average_attendance_rate": self.average_attendance_rate,
            "days_with_attendance": self.days_with_attendance,
        }


@dataclass(frozen=True)
class AttendanceTrend:
    period: str
    attendance_rate: float
    trend: TrendLabel

    def to_dict(self) -> dict:
        return {"period": self.period, "attendance_rate": self.attendance_rate, "trend": self.trend.value}


@dataclass(frozen=True)
class ReportPeriod:
    """ISO date strings; empty when no bound is known."""

    start_date: str
    end_date: str


@dataclass(frozen=True)
class OverallStats:
    total_possible_attendance: int
    total_actual_attendance: int
    overall_attendance_rate: float
    total_days_marked: int


@dataclass(frozen=True)
class AttendanceReport:
    class_name: str
    term_num: int
    year: int
    report_period: ReportPeriod
    total_students: int
    daily_metrics: tuple[DailyAttendanceMetrics, ...]
    weekly_summaries: tuple[WeeklyAttendanceSummary, ...]
    trends: tuple[AttendanceTrend, ...]
    overall_stats: OverallStats

    def to_dict(self) -> dict:
        return {
            "class_name": self.class_name,
            "term_num": self.term_num,
            "year": self.year,
            "report_period": {
                "start_date": self.report_period.start_date,
                "end_date": self.report_period.end_date,
            },
            "total_students": self.total_students,
            "daily_metrics": [d.to_dict() for d in self.daily_metrics],
            "weekly_summaries": [w.to_dict() for w in self.weekly_summaries],
            "trends": [t.to_dict() for t in self.trends],
            "overall_stats": {
                "total_possible_attendance": self.overall_stats.total_possible_attendance,
                "total_actual_attendance": self.overall_stats.total_actual_attendance,
                "overall_attendance_rate": self.overall_stats.overall_attendance_rate,
                "total_days_marked": self.overall_stats.total_days_marked,
            },
        }


@dataclass(frozen=True)
class StudentAttendanceStats:
    student: StudentSummary
    total_days: int
    present_days: int
    absent_days: int
    attendance_rate: float

    def to_dict(self) -> dict:
        return {
            "student": self.student.to_dict(),
            "total_days": self.total_days,
            "present_days": self.present_days,
            "absent_days": self.absent_days,
            "attendance_rate": self.attendance_rate,
        }


@dataclass(frozen=True)
class ClassAttendanceSummary:
    class_name: str
    term_num: int
    year: int
    total_records: int
    present_count: int
    absent_count: int
    attendance_rate: float
    student_stats: tuple[StudentAttendanceStats, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "class_name": self.class_name,
            "term_num": self.term_num,
            "year": self.year,
            "total_records": self.total_records,
            "present_count": self.present_count,
            "absent_count": self.absent_count,
            "attendance_rate": self.attendance_rate,
            "student_stats": [s.to_dict() for s in self.student_stats],
        }
