"""Validation layer for subgraph manifests.

Checks that a parsed manifest can be run safely by the indexing engine:
handler targets are bound to a contract, block handler filters are of a
supported kind and block handler counts stay within limits.
"""

from .errors import (
    DataSourceBlockHandlerLimitExceeded,
    InvalidBlockHandlerFilter,
    ManifestValidationError,
    SourceAddressRequired,
    SubgraphRegistrarError,
    ValidationErrorKind,
)
from .framework import (
    ManifestValidator,
    ValidationIssue,
    ValidationResult,
    ValidationStatus,
    validate_manifest,
)
from .rules import (
    DEFAULT_RULES,
    BlockHandlerFilterRule,
    BlockHandlerLimitRule,
    SourceAddressRule,
    ValidationRule,
)

__all__ = [
    "ManifestValidator",
    "validate_manifest",
    "ValidationResult",
    "ValidationIssue",
    "ValidationStatus",
    "ValidationRule",
    "DEFAULT_RULES",
    "SourceAddressRule",
    "BlockHandlerFilterRule",
    "BlockHandlerLimitRule",
    "SubgraphRegistrarError",
    "ManifestValidationError",
    "ValidationErrorKind",
    "SourceAddressRequired",
    "InvalidBlockHandlerFilter",
    "DataSourceBlockHandlerLimitExceeded",
]
