from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Dict, List

from ..core.enums import AccountStatus, AttendanceStatus, LeaveStatus, Role
from ..payroll.service import total_net_pay
from ..session.snapshot import Snapshot


@dataclass(frozen=True)
class Statistics:
    total_employees: int
    active_employees: int
    present_today: int
    pending_leaves: int
    total_payroll: float

    def to_dict(self) -> dict:
        return asdict(self)


def compute_statistics(snapshot: Snapshot, *, today: date) -> Statistics:
    """Headline numbers for the admin dashboard.

    Note: total_payroll sums every payroll record in memory, across all months.
    """
    employees = [a for a in snapshot.accounts if a.role == Role.EMPLOYEE]
    return Statistics(
        total_employees=len(employees),
        active_employees=sum(1 for a in employees if a.status == AccountStatus.ACTIVE),
        present_today=sum(
            1 for r in snapshot.attendance if r.work_date == today and r.status == AttendanceStatus.PRESENT
        ),
        pending_leaves=sum(1 for leave in snapshot.leaves if leave.status == LeaveStatus.PENDING),
        total_payroll=total_net_pay(snapshot.payroll),
    )


def attendance_breakdown(snapshot: Snapshot) -> Dict[str, int]:
    counts = {s.value: 0 for s in AttendanceStatus}
    for r in snapshot.attendance:
        counts[r.status.value] += 1
    return counts


def department_chart(snapshot: Snapshot) -> List[dict]:
    return [{"name": d.name, "employeeCount": d.employee_count} for d in snapshot.departments]
