from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .leaves.http_leave_repository import HttpLeaveRepository
from .leaves.service import LeaveService
from .payroll.http_payroll_repository import HttpPayrollRepository
from .payroll.service import PayrollService
from .session.manager import SessionManager
from .session.snapshot import Snapshot
from .session.storage import JsonFileSessionStorage, SessionStorage
from .store.client import RemoteStoreClient
from .store.connection import StoreConfig, StoreConnection
from .store.repository import RecordStore
from .users.http_account_repository import HttpAccountRepository
from .users.http_department_repository import HttpDepartmentRepository
from .users.service import AccountService, AuthService


@dataclass(frozen=True)
class Container:
    store: RecordStore
    snapshot: Snapshot
    storage: SessionStorage

    accounts_repo: HttpAccountRepository
    departments_repo: HttpDepartmentRepository
    attendance_repo: HttpAttendanceRepository
    leaves_repo: HttpLeaveRepository
    payroll_repo: HttpPayrollRepository

    auth_service: AuthService
    account_service: AccountService
    attendance_service: AttendanceService
    leave_service: LeaveService
    payroll_service: PayrollService
    session_manager: SessionManager


def build_container(
    *,
    store_config: dict,
    session_file: str | Path,
    reload_after_mutation: bool = False,
    store: Optional[RecordStore] = None,
    storage: Optional[SessionStorage] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    if store is None:
        conn = StoreConnection.get_instance(StoreConfig.from_mapping(store_config))
        store = RemoteStoreClient(conn)
    if storage is None:
        storage = JsonFileSessionStorage(session_file)

    snapshot = Snapshot()

    accounts_repo = HttpAccountRepository(store)
    departments_repo = HttpDepartmentRepository(store)
    attendance_repo = HttpAttendanceRepository(store)
    leaves_repo = HttpLeaveRepository(store)
    payroll_repo = HttpPayrollRepository(store)

    auth_service = AuthService(accounts_repo)
    account_service = AccountService(accounts_repo, snapshot, clock=clock)
    attendance_service = AttendanceService(attendance_repo, snapshot, clock=clock)
    leave_service = LeaveService(leaves_repo, snapshot, clock=clock)
    payroll_service = PayrollService(snapshot)

    session_manager = SessionManager(
        snapshot=snapshot,
        storage=storage,
        auth=auth_service,
        accounts=account_service,
        attendance=attendance_service,
        leaves=leave_service,
        account_repo=accounts_repo,
        attendance_repo=attendance_repo,
        leave_repo=leaves_repo,
        payroll_repo=payroll_repo,
        department_repo=departments_repo,
        reload_after_mutation=reload_after_mutation,
        clock=clock,
    )

    return Container(
        store=store,
        snapshot=snapshot,
        storage=storage,
        accounts_repo=accounts_repo,
        departments_repo=departments_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        payroll_repo=payroll_repo,
        auth_service=auth_service,
        account_service=account_service,
        attendance_service=attendance_service,
        leave_service=leave_service,
        payroll_service=payroll_service,
        session_manager=session_manager,
    )
