"""Pydantic data models for subgraph manifests."""

from sgval.models.manifest import (
    BlockHandler,
    BlockHandlerFilter,
    BlockHandlerFilterKind,
    CallHandler,
    DataSource,
    EventHandler,
    Mapping,
    MappingABI,
    SchemaRef,
    Source,
    SubgraphManifest,
)

__all__ = [
    "SubgraphManifest",
    "DataSource",
    "Source",
    "Mapping",
    "MappingABI",
    "SchemaRef",
    "EventHandler",
    "CallHandler",
    "BlockHandler",
    "BlockHandlerFilter",
    "BlockHandlerFilterKind",
]
