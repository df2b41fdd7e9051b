"""Record and page value objects."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class Record:
    """Value object for one item of the remote collection.

    Only ``id`` is used by the selection logic, ``fields`` is carried
    through for display.
    """

    id: int
    fields: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Record":
        """
        Build a record from a transport payload.

        Args:
            payload: Mapping with an integer ``id`` and any display fields

        Returns:
            Record with every key except ``id`` stored in ``fields``

        Raises:
            ValueError: If ``id`` is missing or not an integer
        """
        record_id = payload.get("id")
        # bool is an int subclass but never a valid id
        if not isinstance(record_id, int) or isinstance(record_id, bool):
            raise ValueError(f"Record payload has no integer id: {record_id!r}")
        fields = {key: value for key, value in payload.items() if key != "id"}
        return cls(id=record_id, fields=fields)

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)


@dataclass(frozen=True)
class Page:
    """One fetched slice of the collection plus the collection size."""

    records: Tuple[Record, ...]
    total_count: int
    page_number: int

    @classmethod
    def of(cls, records: List[Record], total_count: int, page_number: int) -> "Page":
        return cls(records=tuple(records), total_count=total_count, page_number=page_number)

    @property
    def ids(self) -> List[int]:
        return [record.id for record in self.records]

    @property
    def is_empty(self) -> bool:
        return not self.records

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class BulkSelectResult:
    """Outcome of one bulk "select first N" scan."""

    requested: int
    added: int = 0
    selected_count: int = 0
    pages_scanned: int = 0
    exhausted: bool = False
    cancelled: bool = False

    @property
    def shortfall(self) -> int:
        """How many ids the scan fell short of the requested count."""
        return max(0, self.requested - self.selected_count)
