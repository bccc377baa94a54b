"""Structural rules a subgraph manifest must satisfy.

Each rule inspects every data source in declaration order and reports the
first violation it finds. Rules never modify the manifest.
"""

import logging
from abc import ABC, abstractmethod

from ..config import BlockHandlerCountPolicy, SgvalConfig
from ..models import SubgraphManifest
from .errors import (
    DataSourceBlockHandlerLimitExceeded,
    InvalidBlockHandlerFilter,
    ManifestValidationError,
    SourceAddressRequired,
)

logger = logging.getLogger(__name__)


class ValidationRule(ABC):
    """Base class for manifest validation rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @abstractmethod
    def check(self, manifest: SubgraphManifest, config: SgvalConfig) -> ManifestValidationError | None:
        """Check the manifest against this rule.

        Args:
            manifest: Parsed manifest to inspect
            config: sgval configuration

        Returns:
            The error for the first violation found, or None if the rule holds
        """
        pass


class SourceAddressRule(ValidationRule):
    """Data sources with call or block handlers must name a contract address."""

    @property
    def name(self) -> str:
        return "source_address"

    def check(self, manifest: SubgraphManifest, config: SgvalConfig) -> ManifestValidationError | None:
        for i, data_source in enumerate(manifest.data_sources):
            if data_source.source.address is not None:
                continue
            if data_source.has_call_handlers or data_source.has_block_handlers:
                return SourceAddressRequired(
                    data_source=data_source.name,
                    data_source_index=i,
                    path=f"$.dataSources[{i}].source.address",
                )
        return None


class BlockHandlerFilterRule(ValidationRule):
    """Block handlers may only declare call filters."""

    @property
    def name(self) -> str:
        return "block_handler_filter"

    def check(self, manifest: SubgraphManifest, config: SgvalConfig) -> ManifestValidationError | None:
        for i, data_source in enumerate(manifest.data_sources):
            for j, block_handler in enumerate(data_source.mapping.block_handlers):
                if block_handler.filter is None or block_handler.filter.is_call:
                    continue
                return InvalidBlockHandlerFilter(
                    filter_kind=block_handler.filter.kind,
                    data_source=data_source.name,
                    data_source_index=i,
                    handler_index=j,
                    path=f"$.dataSources[{i}].mapping.blockHandlers[{j}].filter.kind",
                )
        return None


class BlockHandlerLimitRule(ValidationRule):
    """Limit the number of block handlers per data source.

    At most one unfiltered block handler is allowed. The second counter
    depends on the configured policy: with ``total`` every block handler
    counts, so any data source with two or more block handlers is rejected;
    with ``call_filtered`` only call-filtered handlers count.
    """

    @property
    def name(self) -> str:
        return "block_handler_limit"

    def check(self, manifest: SubgraphManifest, config: SgvalConfig) -> ManifestValidationError | None:
        policy = config.validation.block_handler_count_policy

        for i, data_source in enumerate(manifest.data_sources):
            block_handlers = data_source.mapping.block_handlers
            if not block_handlers:
                continue

            unfiltered_count = 0
            counted = 0
            for block_handler in block_handlers:
                if block_handler.filter is None:
                    unfiltered_count += 1
                if policy == BlockHandlerCountPolicy.TOTAL:
                    counted += 1
                elif block_handler.filter is not None and block_handler.filter.is_call:
                    counted += 1

            if unfiltered_count > 1 or counted > 1:
                logger.debug(
                    f"Data source {data_source.name!r}: {unfiltered_count} unfiltered, "
                    f"{counted} counted block handlers (policy {BlockHandlerCountPolicy(policy).value})"
                )
                return DataSourceBlockHandlerLimitExceeded(
                    unfiltered_count=unfiltered_count,
                    counted=counted,
                    policy=policy,
                    data_source=data_source.name,
                    data_source_index=i,
                    path=f"$.dataSources[{i}].mapping.blockHandlers",
                )
        return None


# Evaluation order decides which error a manifest with several violations reports
DEFAULT_RULES: tuple[ValidationRule, ...] = (
    SourceAddressRule(),
    BlockHandlerFilterRule(),
    BlockHandlerLimitRule(),
)
