from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import DateLike, iso, optional_calendar_date
from ..common.validators import check_date_range, require_non_empty, require_positive_int
from ..core.exceptions import NotFoundError
from ..enrolment.model import Enrollment
from ..enrolment.repository import RosterProvider
from . import metrics
from .model import AttendanceReport, ClassAttendanceSummary, DailyAttendanceMetrics, ReportPeriod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportQuery:
    class_name: str
    term_num: int
    year: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @classmethod
    def parse(
        cls,
        class_name: str,
        term_num: int,
        year: int,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
    ) -> "ReportQuery":
        start = optional_calendar_date(start_date, "start_date")
        end = optional_calendar_date(end_date, "end_date")
        check_date_range(start, end)
        return cls(
            class_name=require_non_empty(class_name, "class_name"),
            term_num=require_positive_int(term_num, "term_num"),
            year=require_positive_int(year, "year"),
            start_date=start,
            end_date=end,
        )


class AttendanceReportService:
    """Use case: attendance analytics for one class in one term.

    The pipeline is daily metrics -> weekly summaries -> trends; any failure
    aborts the whole report.
    """

    def __init__(self, attendance: AttendanceRepository, roster: RosterProvider):
        self._attendance = attendance
        self._roster = roster

    def _load_roster(self, q: ReportQuery) -> Sequence[Enrollment]:
        enrolments = self._roster.list_enrolled(class_name=q.class_name, term_num=q.term_num, year=q.year)
        if not enrolments:
            logger.warning("No roster for %s term %d/%d", q.class_name, q.term_num, q.year)
            raise NotFoundError("No students found for the specified class and term")
        return enrolments

    def _daily(self, q: ReportQuery) -> tuple[list[DailyAttendanceMetrics], int]:
        enrolments = self._load_roster(q)
        records = self._attendance.list_for_class(
            class_name=q.class_name,
            term_num=q.term_num,
            year=q.year,
            start_date=q.start_date,
            end_date=q.end_date,
        )
        return metrics.build_daily_metrics(records, len(enrolments)), len(enrolments)

    def build_daily_metrics(
        self,
        class_name: str,
        term_num: int,
        year: int,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
    ) -> list[DailyAttendanceMetrics]:
        daily, _ = self._daily(ReportQuery.parse(class_name, term_num, year, start_date, end_date))
        return daily

    def get_attendance_report(
        self,
        class_name: str,
        term_num: int,
        year: int,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
    ) -> AttendanceReport:
        q = ReportQuery.parse(class_name, term_num, year, start_date, end_date)

        daily, total_students = self._daily(q)
        weekly = metrics.build_weekly_summaries(daily)
        trends = metrics.classify_trends(weekly)

        period = ReportPeriod(
            start_date=iso(q.start_date) if q.start_date else (iso(daily[0].date) if daily else ""),
            end_date=iso(q.end_date) if q.end_date else (iso(daily[-1].date) if daily else ""),
        )

        logger.info(
            "Attendance report %s T%d/%d: %d days, %d weeks",
            q.class_name,
            q.term_num,
            q.year,
            len(daily),
            len(weekly),
        )

        return AttendanceReport(
            class_name=q.class_name,
            term_num=q.term_num,
            year=q.year,
            report_period=period,
            total_students=total_students,
            daily_metrics=tuple(daily),
            weekly_summaries=tuple(weekly),
            trends=tuple(trends),
            overall_stats=metrics.build_overall_stats(daily),
        )

    def get_attendance_summary(self, class_name: str, term_num: int, year: int) -> ClassAttendanceSummary:
        q = ReportQuery.parse(class_name, term_num, year)

        records = self._attendance.list_for_class(class_name=q.class_name, term_num=q.term_num, year=q.year)
        return metrics.summarize_class(records, class_name=q.class_name, term_num=q.term_num, year=q.year)
