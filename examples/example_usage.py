"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

import importlib

from config import get_settings_module

from school_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    container.attendance_service.mark_attendance(
        student_number="S001",
        class_name="5A",
        term_num=1,
        year=2024,
        present=True,
        att_date="2024-03-04",
    )
    report = container.report_service.get_attendance_report("5A", 1, 2024, "2024-03-01", "2024-03-31")
    print(report.to_dict()["overall_stats"])


if __name__ == "__main__":
    main()
