from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Department:
    """Read-only summary row; the core never mutates departments."""

    dept_id: Any
    name: str
    employee_count: int = 0

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "Department":
        return cls(
            dept_id=r.get("id"),
            name=str(r.get("name") or ""),
            employee_count=int(r.get("employeeCount") or 0),
        )

    def to_record(self) -> dict:
        return {"id": self.dept_id, "name": self.name, "employeeCount": self.employee_count}
