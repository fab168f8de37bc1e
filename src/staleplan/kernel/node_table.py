"""Per-node attribute storage for a plan."""

from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import (
    AmbiguousMatchError,
    DuplicateNodeError,
    InvalidAttributeError,
    ReservedAttributeError,
    UnknownAttributeError,
    UnknownNodeError,
)

RESERVED_ATTRIBUTES = ("index", "filename")
CHANGE_TIME = "change_time"


class NodeRecord(BaseModel):
    """One tracked file (data or script)."""
    index: int = Field(..., ge=1)
    filename: str
    change_time: Optional[float] = None  # mtime, set by the first staleness pass
    attributes: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class NodeTable:
    """Rows of NodeRecord, where row i - 1 holds the node with index i.

    Columns are index and filename, change_time once timestamps have been
    refreshed, and every extension attribute set on any node. A node that
    lacks an extension attribute reads it as None.
    """

    def __init__(self):
        self._rows: List[NodeRecord] = []
        self._by_filename: Dict[str, int] = {}
        self._extra_columns: List[str] = []
        self._has_change_time = False

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[NodeRecord]:
        return iter(self._rows)

    def __contains__(self, filename: str) -> bool:
        return filename in self._by_filename

    @property
    def columns(self) -> List[str]:
        cols = list(RESERVED_ATTRIBUTES)
        if self._has_change_time:
            cols.append(CHANGE_TIME)
        return cols + self._extra_columns

    def append(self, filename: str, attributes: Optional[Dict[str, Any]] = None) -> NodeRecord:
        """Create the next row. Returns the new record."""
        if filename in self._by_filename:
            raise DuplicateNodeError(filename)
        attributes = dict(attributes or {})
        for name in attributes:
            if name in RESERVED_ATTRIBUTES:
                raise ReservedAttributeError(name)
        change_time = attributes.pop(CHANGE_TIME, None)
        try:
            record = NodeRecord(
                index=len(self._rows) + 1,
                filename=filename,
                change_time=change_time,
                attributes=attributes,
            )
        except ValidationError as e:
            raise _invalid_attribute(e) from e
        self._rows.append(record)
        self._by_filename[filename] = record.index
        if change_time is not None:
            self._has_change_time = True
        self._register_columns(attributes)
        return record

    def row(self, index: int) -> NodeRecord:
        if not isinstance(index, int) or isinstance(index, bool) or not 1 <= index <= len(self._rows):
            raise UnknownNodeError(index)
        return self._rows[index - 1]

    def index_of(self, filename: str) -> int:
        try:
            return self._by_filename[filename]
        except KeyError:
            raise UnknownNodeError(filename, f"No node for filename: {filename}") from None

    def get(self, index: int, name: str) -> Any:
        record = self.row(index)
        if name not in self.columns:
            raise UnknownAttributeError(name)
        if name in RESERVED_ATTRIBUTES or name == CHANGE_TIME:
            return getattr(record, name)
        return record.attributes.get(name)

    def set(self, index: int, name: str, value: Any) -> None:
        record = self.row(index)
        if name in RESERVED_ATTRIBUTES:
            raise ReservedAttributeError(name)
        if name == CHANGE_TIME:
            try:
                record.change_time = value
            except ValidationError as e:
                raise _invalid_attribute(e) from e
            self._has_change_time = True
            return
        record.attributes[name] = value
        self._register_columns([name])

    def set_change_times(self, change_times: List[float]) -> None:
        """Overwrite change_time on every row, aligned with row order."""
        for record, change_time in zip(self._rows, change_times):
            record.change_time = change_time
        self._has_change_time = True

    def find(self, value: Any, name: str) -> int:
        if name not in self.columns:
            raise UnknownAttributeError(name)
        if name == "filename" and isinstance(value, str):
            return self.index_of(value)
        matches = [r.index for r in self._rows if self.get(r.index, name) == value]
        if not matches:
            raise UnknownNodeError(value, f"No node has {name} == {value!r}")
        if len(matches) > 1:
            raise AmbiguousMatchError(name, value, matches)
        return matches[0]

    def _register_columns(self, names) -> None:
        for name in names:
            if name not in self._extra_columns:
                self._extra_columns.append(name)


def _invalid_attribute(error: ValidationError) -> InvalidAttributeError:
    first = error.errors()[0]
    name = str(first["loc"][0]) if first["loc"] else CHANGE_TIME
    return InvalidAttributeError(name, first["msg"])
