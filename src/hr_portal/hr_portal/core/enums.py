from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for access control in the controller layer."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AccountStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class LeaveStatus(str, Enum):
    """Leave workflow: PENDING -> APPROVED | REJECTED (both terminal)."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PayrollStatus(str, Enum):
    PAID = "paid"
    PENDING = "pending"


class Collection(str, Enum):
    """Named collections served by the remote store."""

    ACCOUNTS = "accounts"
    ATTENDANCE = "attendance"
    LEAVES = "leaves"
    PAYROLL = "payroll"
    DEPARTMENTS = "departments"


class SessionOrigin(str, Enum):
    LOGIN = "login"
    BOOTSTRAP = "bootstrap"
