from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Protocol, TypeVar

from ..core.enums import Collection
from ..core.exceptions import TransportError

T = TypeVar("T")


class RecordStore(Protocol):
    """Uniform CRUD access to the remote collections.

    Note (DIP): feature repositories depend on this interface, not on HTTP.
    """

    def list_all(self, collection: Collection) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def create(self, collection: Collection, fields: Mapping[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def update_by_id(self, collection: Collection, record_id: Any, record: Mapping[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def delete_by_id(self, collection: Collection, record_id: Any) -> None:
        raise NotImplementedError


def map_record(collection: Collection, row: Any, from_record: Callable[[Mapping[str, Any]], T]) -> T:
    """Build a model from one store row; a row the model cannot read is a transport error."""
    try:
        return from_record(row)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        record_id = row.get("id") if isinstance(row, Mapping) else None
        raise TransportError(f"malformed {collection.value} record {record_id}: {e}") from e


def map_records(collection: Collection, rows: Iterable[Any], from_record: Callable[[Mapping[str, Any]], T]) -> List[T]:
    return [map_record(collection, row, from_record) for row in rows]
