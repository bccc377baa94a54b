"""Models for a parsed subgraph manifest and its data sources."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Manifests are handed to the validator already parsed and are never
# mutated by it, hence frozen.
_MODEL_CONFIG = ConfigDict(populate_by_name=True, frozen=True)


class BlockHandlerFilterKind(str, Enum):
    """Block handler filter kinds the engine can run."""
    CALL = "call"


class BlockHandlerFilter(BaseModel):
    """Filter narrowing which blocks trigger a block handler.

    Only ``kind`` is interpreted; any other keys are kept as opaque
    parameters of the filter.
    """
    kind: str

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def is_call(self) -> bool:
        """Check if this is a call filter."""
        return self.kind == BlockHandlerFilterKind.CALL.value


class EventHandler(BaseModel):
    """Handler triggered by a contract event."""
    event: str
    handler: str
    topic0: str | None = None

    model_config = _MODEL_CONFIG


class CallHandler(BaseModel):
    """Handler triggered by a call to a contract function."""
    function: str
    handler: str

    model_config = _MODEL_CONFIG


class BlockHandler(BaseModel):
    """Handler triggered for blocks, optionally filtered."""
    handler: str
    filter: BlockHandlerFilter | None = None

    model_config = _MODEL_CONFIG


class MappingABI(BaseModel):
    """ABI referenced by a mapping."""
    name: str
    file: str

    model_config = _MODEL_CONFIG


class Mapping(BaseModel):
    """Handlers and runtime metadata attached to a data source."""
    kind: str = "ethereum/events"
    api_version: str | None = Field(alias="apiVersion", default=None)
    language: str = "wasm/assemblyscript"
    entities: list[str] = Field(default_factory=list)
    abis: list[MappingABI] = Field(default_factory=list)

    # Handler collections keep manifest declaration order
    event_handlers: list[EventHandler] = Field(alias="eventHandlers", default_factory=list)
    call_handlers: list[CallHandler] = Field(alias="callHandlers", default_factory=list)
    block_handlers: list[BlockHandler] = Field(alias="blockHandlers", default_factory=list)

    file: str | None = None

    model_config = _MODEL_CONFIG


class Source(BaseModel):
    """On-chain entity a data source observes."""
    address: str | None = None  # None means not bound to one contract
    abi: str | None = None
    start_block: int = Field(alias="startBlock", default=0)

    @field_validator("start_block")
    @classmethod
    def validate_start_block(cls, v):
        if v < 0:
            raise ValueError("start_block must be >= 0")
        return v

    model_config = _MODEL_CONFIG


class DataSource(BaseModel):
    """One observation unit of a subgraph manifest."""
    kind: str = "ethereum/contract"
    name: str
    network: str | None = None
    source: Source = Field(default_factory=Source)
    mapping: Mapping = Field(default_factory=Mapping)

    @property
    def has_call_handlers(self) -> bool:
        return bool(self.mapping.call_handlers)

    @property
    def has_block_handlers(self) -> bool:
        return bool(self.mapping.block_handlers)

    model_config = _MODEL_CONFIG


class SchemaRef(BaseModel):
    """Reference to the GraphQL schema of a subgraph."""
    file: str

    model_config = _MODEL_CONFIG


class SubgraphManifest(BaseModel):
    """Parsed subgraph manifest, the unit under validation."""
    spec_version: str = Field(alias="specVersion", default="0.0.1")
    description: str | None = None
    repository: str | None = None
    schema_ref: SchemaRef | None = Field(alias="schema", default=None)
    data_sources: list[DataSource] = Field(alias="dataSources", default_factory=list)

    model_config = _MODEL_CONFIG
