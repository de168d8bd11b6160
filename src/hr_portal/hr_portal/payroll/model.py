from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class PayrollRecord:
    """Domain entity: one payslip.

    Note: ``net_pay`` is stored by the server and never recomputed here.
    """

    payroll_id: Any
    account_id: Any
    month: str
    basic_salary: float
    bonus: float
    deductions: float
    net_pay: float
    status: PayrollStatus
    pay_date: str = ""

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "PayrollRecord":
        return cls(
            payroll_id=r.get("id"),
            account_id=r.get("userId"),
            month=str(r.get("month") or ""),
            basic_salary=float(r.get("basicSalary") or 0),
            bonus=float(r.get("bonus") or 0),
            deductions=float(r.get("deductions") or 0),
            net_pay=float(r.get("netPay") or 0),
            status=PayrollStatus(r.get("status") or PayrollStatus.PENDING.value),
            pay_date=str(r.get("payDate") or ""),
        )

    def to_record(self) -> dict:
        return {
            "id": self.payroll_id,
            "userId": self.account_id,
            "month": self.month,
            "basicSalary": self.basic_salary,
            "bonus": self.bonus,
            "deductions": self.deductions,
            "netPay": self.net_pay,
            "status": self.status.value,
            "payDate": self.pay_date,
        }
