"""Tests for manifest validation errors."""

from sgval.config import BlockHandlerCountPolicy
from sgval.validation.errors import (
    DataSourceBlockHandlerLimitExceeded,
    InvalidBlockHandlerFilter,
    ManifestValidationError,
    SourceAddressRequired,
    SubgraphRegistrarError,
    ValidationErrorKind,
)


class TestErrorKinds:
    """Each error class maps to one kind."""

    def test_kinds(self):
        assert SourceAddressRequired.kind == ValidationErrorKind.SOURCE_ADDRESS_REQUIRED
        assert InvalidBlockHandlerFilter.kind == ValidationErrorKind.INVALID_BLOCK_HANDLER_FILTER
        assert DataSourceBlockHandlerLimitExceeded.kind == ValidationErrorKind.DATA_SOURCE_BLOCK_HANDLER_LIMIT_EXCEEDED

    def test_hierarchy(self):
        for error_class in (SourceAddressRequired, InvalidBlockHandlerFilter, DataSourceBlockHandlerLimitExceeded):
            assert issubclass(error_class, ManifestValidationError)
            assert issubclass(error_class, SubgraphRegistrarError)


class TestErrorMessages:
    """Test error message and context rendering."""

    def test_default_message(self):
        error = SourceAddressRequired()
        assert error.message == SourceAddressRequired.default_message
        assert str(error) == SourceAddressRequired.default_message

    def test_str_includes_data_source(self):
        error = SourceAddressRequired(data_source="Gravity", data_source_index=0)
        assert str(error) == f"{SourceAddressRequired.default_message} (data source 'Gravity')"

    def test_custom_message(self):
        error = InvalidBlockHandlerFilter("bad filter", filter_kind="polling")
        assert error.message == "bad filter"
        assert error.filter_kind == "polling"

    def test_filter_kind_in_default_message(self):
        error = InvalidBlockHandlerFilter(filter_kind="once")
        assert error.message.endswith("got 'once'")

    def test_limit_to_dict(self):
        error = DataSourceBlockHandlerLimitExceeded(
            unfiltered_count=2,
            counted=3,
            policy=BlockHandlerCountPolicy.TOTAL,
            data_source="Blocks",
            data_source_index=2,
            path="$.dataSources[2].mapping.blockHandlers",
        )
        assert error.to_dict() == {
            "kind": "data_source_block_handler_limit_exceeded",
            "message": DataSourceBlockHandlerLimitExceeded.default_message,
            "dataSource": "Blocks",
            "dataSourceIndex": 2,
            "handlerIndex": None,
            "path": "$.dataSources[2].mapping.blockHandlers",
            "unfilteredCount": 2,
            "counted": 3,
            "policy": "total",
        }
