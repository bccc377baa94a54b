"""Errors raised when a subgraph manifest is rejected."""

from enum import Enum
from typing import ClassVar

from ..config import BlockHandlerCountPolicy


class ValidationErrorKind(str, Enum):
    """Manifest validation error kinds."""
    SOURCE_ADDRESS_REQUIRED = "source_address_required"
    INVALID_BLOCK_HANDLER_FILTER = "invalid_block_handler_filter"
    DATA_SOURCE_BLOCK_HANDLER_LIMIT_EXCEEDED = "data_source_block_handler_limit_exceeded"


class SubgraphRegistrarError(Exception):
    """Base class for errors a subgraph registrar reports to its caller."""


class ManifestValidationError(SubgraphRegistrarError):
    """A manifest violates one of the structural validation rules.

    Not retryable: the manifest has to be edited.
    """

    kind: ClassVar[ValidationErrorKind]
    default_message: ClassVar[str] = "Manifest validation failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        data_source: str | None = None,
        data_source_index: int | None = None,
        handler_index: int | None = None,
        path: str | None = None,
    ):
        self.message = message or self.default_message
        self.data_source = data_source
        self.data_source_index = data_source_index
        self.handler_index = handler_index
        self.path = path
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.data_source:
            return f"{self.message} (data source '{self.data_source}')"
        return self.message

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "dataSource": self.data_source,
            "dataSourceIndex": self.data_source_index,
            "handlerIndex": self.handler_index,
            "path": self.path,
        }


class SourceAddressRequired(ManifestValidationError):
    """A data source with call or block handlers has no contract address."""

    kind = ValidationErrorKind.SOURCE_ADDRESS_REQUIRED
    default_message = "Data sources with call or block handlers require a source address"


class InvalidBlockHandlerFilter(ManifestValidationError):
    """A block handler declares a filter kind other than call."""

    kind = ValidationErrorKind.INVALID_BLOCK_HANDLER_FILTER
    default_message = "Block handler filters must be of kind 'call'"

    def __init__(self, message: str | None = None, *, filter_kind: str | None = None, **context):
        self.filter_kind = filter_kind
        if message is None and filter_kind is not None:
            message = f"{self.default_message}, got '{filter_kind}'"
        super().__init__(message, **context)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["filterKind"] = self.filter_kind
        return data


class DataSourceBlockHandlerLimitExceeded(ManifestValidationError):
    """A data source declares more block handlers than the engine allows."""

    kind = ValidationErrorKind.DATA_SOURCE_BLOCK_HANDLER_LIMIT_EXCEEDED
    default_message = (
        "Data sources may have at most one unfiltered block handler "
        "and at most one call-filtered block handler"
    )

    def __init__(
        self,
        message: str | None = None,
        *,
        unfiltered_count: int = 0,
        counted: int = 0,
        policy: BlockHandlerCountPolicy = BlockHandlerCountPolicy.TOTAL,
        **context,
    ):
        self.unfiltered_count = unfiltered_count
        self.counted = counted
        self.policy = policy
        super().__init__(message, **context)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["unfilteredCount"] = self.unfiltered_count
        data["counted"] = self.counted
        data["policy"] = BlockHandlerCountPolicy(self.policy).value
        return data
