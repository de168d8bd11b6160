from __future__ import annotations

import itertools
import threading
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from ..attendance.model import AttendanceRecord
from ..core.enums import Collection
from ..leaves.model import LeaveRequest
from ..payroll.model import PayrollRecord
from ..users.department_model import Department
from ..users.model import Account

_ID_GETTERS: Dict[Collection, Callable[[Any], Any]] = {
    Collection.ACCOUNTS: lambda r: r.account_id,
    Collection.ATTENDANCE: lambda r: r.record_id,
    Collection.LEAVES: lambda r: r.leave_id,
    Collection.PAYROLL: lambda r: r.payroll_id,
    Collection.DEPARTMENTS: lambda r: r.dept_id,
}


def same_id(a: Any, b: Any) -> bool:
    """Ids match as given, or by their text form (json-server may send `"5"` for `5`)."""
    return a == b or (a is not None and b is not None and str(a) == str(b))


class Snapshot:
    """In-memory replica of the five store collections.

    Every operation takes a ticket from :meth:`issue` before it sends its
    request. A full replacement only lands if its ticket is newer than the
    last ticket applied to that collection; local patches always land and
    advance the collection's ticket. A reload that was issued before a
    mutation therefore cannot revert the mutation's patch.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._tickets = itertools.count(1)
        self._applied: Dict[Collection, int] = {c: 0 for c in Collection}
        self._data: Dict[Collection, List[Any]] = {c: [] for c in Collection}

    def issue(self) -> int:
        with self._lock:
            return next(self._tickets)

    def last_applied(self, collection: Collection) -> int:
        with self._lock:
            return self._applied[collection]

    # Full replacement (reload)
    def replace_all(self, ticket: int, collections: Mapping[Collection, Sequence[Any]]) -> Set[Collection]:
        applied: Set[Collection] = set()
        with self._lock:
            for collection, items in collections.items():
                if ticket <= self._applied[collection]:
                    continue
                self._data[collection] = list(items)
                self._applied[collection] = ticket
                applied.add(collection)
        return applied

    # Local patches
    def _advance(self, collection: Collection, ticket: int) -> None:
        self._applied[collection] = max(self._applied[collection], ticket)

    def append(self, collection: Collection, ticket: int, item: Any) -> None:
        """Add a created record; replaces it instead if a reload already brought it in."""
        get_id = _ID_GETTERS[collection]
        with self._lock:
            target = get_id(item)
            rows = self._data[collection]
            for i, r in enumerate(rows):
                if same_id(get_id(r), target):
                    rows[i] = item
                    break
            else:
                rows.append(item)
            self._advance(collection, ticket)

    def replace(self, collection: Collection, ticket: int, item: Any) -> None:
        get_id = _ID_GETTERS[collection]
        with self._lock:
            target = get_id(item)
            self._data[collection] = [item if same_id(get_id(r), target) else r for r in self._data[collection]]
            self._advance(collection, ticket)

    def remove(self, collection: Collection, ticket: int, ids: Iterable[Any]) -> None:
        get_id = _ID_GETTERS[collection]
        drop = list(ids)
        with self._lock:
            self._data[collection] = [r for r in self._data[collection] if not any(same_id(get_id(r), d) for d in drop)]
            self._advance(collection, ticket)

    # Read access
    def items(self, collection: Collection) -> Tuple[Any, ...]:
        with self._lock:
            return tuple(self._data[collection])

    def find(self, collection: Collection, record_id: Any) -> Optional[Any]:
        get_id = _ID_GETTERS[collection]
        for r in self.items(collection):
            if same_id(get_id(r), record_id):
                return r
        return None

    def resolve_id(self, collection: Collection, raw_id: Any) -> Any:
        """Map an id taken from a URL to the id stored in the snapshot, if any."""
        found = self.find(collection, raw_id)
        return _ID_GETTERS[collection](found) if found is not None else raw_id

    @property
    def accounts(self) -> Tuple[Account, ...]:
        return self.items(Collection.ACCOUNTS)

    @property
    def attendance(self) -> Tuple[AttendanceRecord, ...]:
        return self.items(Collection.ATTENDANCE)

    @property
    def leaves(self) -> Tuple[LeaveRequest, ...]:
        return self.items(Collection.LEAVES)

    @property
    def payroll(self) -> Tuple[PayrollRecord, ...]:
        return self.items(Collection.PAYROLL)

    @property
    def departments(self) -> Tuple[Department, ...]:
        return self.items(Collection.DEPARTMENTS)
