from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..attendance.repository import AttendanceRepository
from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local
from ..core.enums import Collection, Role, SessionOrigin
from ..core.exceptions import AuthorizationError, NotFoundError, PartialCascadeFailure, StoreError
from ..dashboard.statistics import Statistics, compute_statistics
from ..leaves.model import LeaveRequest
from ..leaves.repository import LeaveRepository
from ..leaves.service import LeaveService
from ..payroll.repository import PayrollRepository
from ..users.department_repository import DepartmentRepository
from ..users.model import Account
from ..users.repository import AccountRepository
from ..users.service import AccountService, AuthService
from .cascade import CascadeLog, PendingDeletion
from .model import Session
from .snapshot import Snapshot, same_id
from .storage import SessionStorage

logger = logging.getLogger(__name__)

RELOAD_FAILED_MESSAGE = "Failed to fetch data. Please ensure the data server is running."
AUTO_MARK_FAILED_MESSAGE = "Logged in, but today's attendance could not be marked."


class SessionManager:
    """Session lifecycle and consistency between the snapshot and the store.

    The manager owns the current :class:`Session` and the in-memory
    :class:`Snapshot`; the controller layer receives it through the container.
    """

    def __init__(
        self,
        *,
        snapshot: Snapshot,
        storage: SessionStorage,
        auth: AuthService,
        accounts: AccountService,
        attendance: AttendanceService,
        leaves: LeaveService,
        account_repo: AccountRepository,
        attendance_repo: AttendanceRepository,
        leave_repo: LeaveRepository,
        payroll_repo: PayrollRepository,
        department_repo: DepartmentRepository,
        reload_after_mutation: bool = False,
        clock: Callable[[], datetime] = now_local,
    ):
        self._snapshot = snapshot
        self._storage = storage
        self._auth = auth
        self._accounts = accounts
        self._attendance = attendance
        self._leaves = leaves
        self._account_repo = account_repo
        self._attendance_repo = attendance_repo
        self._leave_repo = leave_repo
        self._payroll_repo = payroll_repo
        self._department_repo = department_repo
        self._reload_after_mutation = bool(reload_after_mutation)
        self._clock = clock

        self._session: Optional[Session] = None
        self._cascade_log = CascadeLog()
        self.last_error: Optional[str] = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def current_session(self) -> Optional[Session]:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def pending_cascades(self) -> List[PendingDeletion]:
        return self._cascade_log.pending()

    def require_session(self) -> Session:
        if self._session is None:
            raise AuthorizationError("Please log in to continue")
        return self._session

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def reload(self) -> None:
        """Fetch all five collections; apply them only if every fetch succeeded."""
        ticket = self._snapshot.issue()
        fresh = {
            Collection.ACCOUNTS: self._account_repo.list_all(),
            Collection.ATTENDANCE: self._attendance_repo.list_all(),
            Collection.LEAVES: self._leave_repo.list_all(),
            Collection.PAYROLL: self._payroll_repo.list_all(),
            Collection.DEPARTMENTS: self._department_repo.list_all(),
        }
        applied = self._snapshot.replace_all(ticket, fresh)
        skipped = set(fresh) - applied
        if skipped:
            logger.debug("Reload %s skipped stale collections: %s", ticket, sorted(c.value for c in skipped))

    def bootstrap_session(self) -> Optional[Session]:
        """Restore the persisted session (no server check), then load all data."""
        record = self._storage.read()
        if record:
            try:
                account = Account.from_record(record)
            except (TypeError, ValueError) as e:
                logger.warning("Discarding unreadable persisted session: %s", e)
                self._storage.clear()
            else:
                self._session = Session(account=account, started_at=self._clock(), origin=SessionOrigin.BOOTSTRAP)
                logger.info("Restored session for account %s", account.account_id)

        try:
            self.reload()
        except StoreError as e:
            logger.error("Initial data load failed: %s", e)
            self.last_error = RELOAD_FAILED_MESSAGE

        return self._session

    def _after_mutation(self) -> None:
        if not self._reload_after_mutation:
            return
        try:
            self.reload()
        except StoreError as e:
            # The mutation itself succeeded and is already patched in.
            logger.error("Reload after mutation failed: %s", e)
            self.last_error = RELOAD_FAILED_MESSAGE

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def login(self, username: str, password: str) -> Account:
        account = self._auth.authenticate(username, password)

        try:
            self._storage.write(account.to_record(include_password=False))
        except OSError as e:
            logger.error("Could not persist session for account %s: %s", account.account_id, e)

        self._session = Session(account=account, started_at=self._clock(), origin=SessionOrigin.LOGIN)
        self.last_error = None

        if account.role == Role.EMPLOYEE:
            try:
                self._attendance.auto_mark(account.account_id)
            except StoreError as e:
                logger.error("Auto-mark for account %s failed: %s", account.account_id, e)
                self.last_error = AUTO_MARK_FAILED_MESSAGE

        return account

    def logout(self) -> None:
        if self._session is not None:
            logger.info("Account %s logged out", self._session.account_id)
        self._session = None
        try:
            self._storage.clear()
        except OSError as e:
            logger.error("Could not clear persisted session: %s", e)

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------
    def register(self, fields: Mapping[str, Any]) -> Account:
        account = self._accounts.register(fields)
        self._after_mutation()
        return account

    def add_account(self, fields: Mapping[str, Any]) -> Account:
        account = self._accounts.add_account(fields)
        self._after_mutation()
        return account

    def update_account(self, account_id: Any, fields: Mapping[str, Any]) -> Account:
        account = self._accounts.update_account(account_id, fields)
        self._after_mutation()
        return account

    def _deleter(self, collection: Collection) -> Callable[[Any], None]:
        return {
            Collection.ATTENDANCE: self._attendance_repo.delete_by_id,
            Collection.LEAVES: self._leave_repo.delete_by_id,
            Collection.PAYROLL: self._payroll_repo.delete_by_id,
        }[collection]

    def _dependents_of(self, account_id: Any) -> List[Tuple[Collection, Any]]:
        snap = self._snapshot
        return (
            [(Collection.ATTENDANCE, r.record_id) for r in snap.attendance if same_id(r.account_id, account_id)]
            + [(Collection.LEAVES, r.leave_id) for r in snap.leaves if same_id(r.account_id, account_id)]
            + [(Collection.PAYROLL, r.payroll_id) for r in snap.payroll if same_id(r.account_id, account_id)]
        )

    def delete_account_cascade(self, account_id: Any) -> None:
        """Delete an account and every attendance/leave/payroll record that references it.

        Dependents come from the snapshot and are deleted one at a time; a
        failure does not stop the remaining deletions. Failed ones are queued
        in the cascade log and reported with PartialCascadeFailure.
        """
        account_id = self._snapshot.resolve_id(Collection.ACCOUNTS, account_id)
        ticket = self._snapshot.issue()
        dependents = self._dependents_of(account_id)

        self._account_repo.delete_by_id(account_id)
        self._snapshot.remove(Collection.ACCOUNTS, ticket, [account_id])

        deleted: Dict[Collection, List[Any]] = {}
        failures: List[Tuple[Collection, Any, Exception]] = []
        for collection, record_id in dependents:
            try:
                self._deleter(collection)(record_id)
            except NotFoundError:
                logger.info("%s record %s was already gone", collection.value, record_id)
            except StoreError as e:
                logger.error("Cascade delete of %s record %s failed: %s", collection.value, record_id, e)
                failures.append((collection, record_id, e))
                self._cascade_log.add(
                    PendingDeletion(account_id=account_id, collection=collection, record_id=record_id, error=str(e))
                )
                continue
            deleted.setdefault(collection, []).append(record_id)

        for collection, ids in deleted.items():
            self._snapshot.remove(collection, ticket, ids)

        logger.info(
            "Deleted account %s with %d related record(s), %d failed",
            account_id,
            sum(len(ids) for ids in deleted.values()),
            len(failures),
        )
        self._after_mutation()
        if failures:
            raise PartialCascadeFailure(account_id, failures)

    def retry_pending_cascades(self) -> int:
        """Re-issue queued dependent deletions. Returns how many are still pending."""
        for entry in self._cascade_log.pending():
            ticket = self._snapshot.issue()
            try:
                self._deleter(entry.collection)(entry.record_id)
            except NotFoundError:
                pass
            except StoreError as e:
                logger.warning("Retry of %s record %s failed: %s", entry.collection.value, entry.record_id, e)
                self._cascade_log.add(
                    PendingDeletion(
                        account_id=entry.account_id,
                        collection=entry.collection,
                        record_id=entry.record_id,
                        error=str(e),
                    )
                )
                continue
            self._cascade_log.discard(entry)
            self._snapshot.remove(entry.collection, ticket, [entry.record_id])

        return len(self._cascade_log)

    # ------------------------------------------------------------------
    # Leaves
    # ------------------------------------------------------------------
    def submit_leave(self, fields: Mapping[str, Any]) -> LeaveRequest:
        session = self.require_session()
        leave = self._leaves.submit(session.account_id, fields)
        self._after_mutation()
        return leave

    def set_leave_status(self, leave_id: Any, status: Any) -> LeaveRequest:
        leave = self._leaves.set_status(leave_id, status)
        self._after_mutation()
        return leave

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------
    def compute_statistics(self, *, today: Optional[date] = None) -> Statistics:
        return compute_statistics(self._snapshot, today=today or self._clock().date())
