"""Exception types raised by strict_records."""

from typing import Any, List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from strict_records.ir.validators import SchemaIssue


class StrictRecordsError(Exception):
    """Base class for all strict_records errors."""

    pass


class FlushError(StrictRecordsError):
    """
    Raised when a record still has backend-generated fields that are unset.

    Attributes:
        entity_name: Name of the record type that was checked
        undefined_fields: Generated fields without a value, in declared order
        context: Whatever the caller passed as context (string or any object)
    """

    def __init__(
        self,
        entity_name: str,
        undefined_fields: Sequence[str],
        context: Any = None,
    ):
        self.entity_name = entity_name
        self.undefined_fields: List[str] = list(undefined_fields)
        self.context = context
        if isinstance(context, str):
            message = context
        else:
            message = (
                f"{entity_name} not flushed: missing "
                f"{', '.join(self.undefined_fields)}"
            )
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.args[0]


class InvalidFieldPathError(StrictRecordsError):
    """Raised when a selection path is not valid for a schema and depth."""

    def __init__(self, entity_name: str, invalid_paths: Sequence[str], max_depth: int):
        self.entity_name = entity_name
        self.invalid_paths: List[str] = list(invalid_paths)
        self.max_depth = max_depth
        super().__init__(
            f"{entity_name}: invalid field path(s) at depth {max_depth}: "
            f"{', '.join(self.invalid_paths)}"
        )

    @property
    def message(self) -> str:
        return self.args[0]


class SchemaError(StrictRecordsError):
    """Raised when a schema cannot be built, registered or resolved."""

    def __init__(
        self,
        message: str,
        entity_name: Optional[str] = None,
        issues: Optional[List["SchemaIssue"]] = None,
    ):
        self.entity_name = entity_name
        self.issues = list(issues or [])
        super().__init__(message)
