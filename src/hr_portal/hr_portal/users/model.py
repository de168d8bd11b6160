from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import format_iso_date, parse_optional_date
from ..core.constants import DEFAULT_LEAVE_ALLOWANCE, EMPLOYEE_CODE_PREFIX
from ..core.enums import AccountStatus, Role


@dataclass(frozen=True)
class Account:
    """Domain entity: an employee or admin account.

    Note: ``password`` holds a werkzeug hash for accounts created by this
    package; older seed data may still carry the raw value.
    """

    account_id: Any
    username: str
    password: str
    role: Role
    name: str
    email: str = ""
    phone: str = ""
    department: str = ""
    position: str = ""
    join_date: Optional[date] = None
    salary: float = 0.0
    status: AccountStatus = AccountStatus.ACTIVE
    leave_allowance: int = DEFAULT_LEAVE_ALLOWANCE
    used_leaves: int = 0
    avatar_url: str = ""
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    @property
    def remaining_leaves(self) -> int:
        return max(self.leave_allowance - self.used_leaves, 0)

    @property
    def employee_code(self) -> str:
        return f"{EMPLOYEE_CODE_PREFIX}{str(self.account_id).zfill(4)}"

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "Account":
        return cls(
            account_id=r.get("id"),
            username=str(r.get("username") or ""),
            password=str(r.get("password") or ""),
            role=Role(r.get("role") or Role.EMPLOYEE.value),
            name=str(r.get("name") or ""),
            email=str(r.get("email") or ""),
            phone=str(r.get("phone") or ""),
            department=str(r.get("department") or ""),
            position=str(r.get("position") or ""),
            join_date=parse_optional_date(r.get("joinDate")),
            salary=float(r.get("salary") or 0),
            status=AccountStatus(r.get("status") or AccountStatus.ACTIVE.value),
            leave_allowance=int(r.get("leaves", DEFAULT_LEAVE_ALLOWANCE) or 0),
            used_leaves=int(r.get("usedLeaves") or 0),
            avatar_url=str(r.get("photoUrl") or ""),
            raw=dict(r),
        )

    def to_record(self, *, include_password: bool = True) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "username": self.username,
            "password": self.password,
            "role": self.role.value,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "department": self.department,
            "position": self.position,
            "joinDate": format_iso_date(self.join_date),
            "salary": self.salary,
            "status": self.status.value,
            "leaves": self.leave_allowance,
            "usedLeaves": self.used_leaves,
            "photoUrl": self.avatar_url,
        }
        if self.account_id is not None:
            record = {"id": self.account_id, **record}
        if not include_password:
            record.pop("password")
        return record

    def patched_record(self, changes: Mapping[str, Any]) -> Dict[str, Any]:
        """The server's record as last fetched, with ``changes`` applied on top."""
        record = dict(self.raw) if self.raw else self.to_record()
        record.update(changes)
        return record
