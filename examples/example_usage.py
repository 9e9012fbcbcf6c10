"""Example: drive the service layer directly (no Flask).

Imports a small roster, marks two days and prints the report for the range.
"""

import tempfile

from rollbook.container import build_container


def main():
    with tempfile.TemporaryDirectory() as data_dir:
        container = build_container(data_dir=data_dir)
        staff = container.auth_service.sign_in("T01", "secret").staff

        result = container.roster_service.import_csv(staff.code, "101,Arun Kumar\n102,Ganesh Raj\n103,Priya S")
        print(result.errors or f"imported {len(result.students)} students")

        container.attendance_service.mark(staff.code, date="2024-01-01", absent="102")
        container.attendance_service.mark(staff.code, date="2024-01-02", on_duty="101,103")

        for summary in container.report_service.build_report(staff.code, start="2024-01-01", end="2024-01-31"):
            print(summary.to_dict())


if __name__ == "__main__":
    main()
