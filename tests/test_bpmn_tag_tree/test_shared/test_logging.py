"""Tests for logging helpers and the error hierarchy."""

import logging

from bpmn_tag_tree.shared import (
    CorrelationLogger,
    InvalidConfigError,
    InvalidElementError,
    NoParentError,
    TagTreeError,
    UnknownElementKindError,
    get_logger,
)


class TestCorrelationLogger:
    """Test correlation-aware logging."""

    def test_component_defaults_to_module_name(self):
        """Test the component is derived from the logger name."""
        logger = get_logger("bpmn_tag_tree.tree.node")

        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "node"
        assert logger.correlation_id is None

    def test_records_carry_correlation_info(self, caplog):
        """Test extra fields attached to each record."""
        logger = get_logger("bpmn_tag_tree.test", "req-1", "tests")

        with caplog.at_level(logging.DEBUG, logger="bpmn_tag_tree.test"):
            logger.debug("hello", extra={"tag": "process"})

        record = caplog.records[-1]
        assert record.getMessage() == "hello"
        assert record.component == "tests"
        assert record.correlation_id == "req-1"
        assert record.tag == "process"

    def test_with_correlation(self):
        """Test binding another correlation id."""
        logger = get_logger("bpmn_tag_tree.test", None, "tests")

        bound = logger.with_correlation("doc-7")

        assert bound.correlation_id == "doc-7"
        assert bound.component == "tests"
        assert bound.logger is logger.logger

    def test_error_records(self, caplog):
        """Test error records with and without exception info."""
        logger = get_logger("bpmn_tag_tree.test", "req-2", "tests")

        with caplog.at_level(logging.ERROR, logger="bpmn_tag_tree.test"):
            logger.error("plain failure", exc_info=False)
            try:
                raise NoParentError("orphan")
            except NoParentError:
                logger.error("caught failure")

        plain, caught = caplog.records[-2:]
        assert plain.levelno == logging.ERROR
        assert not plain.exc_info
        assert caught.exc_info[0] is NoParentError
        assert caught.correlation_id == "req-2"

    def test_is_debug_enabled(self, caplog):
        """Test the debug level check follows the logger level."""
        logger = get_logger("bpmn_tag_tree.debug_check")

        with caplog.at_level(logging.DEBUG, logger="bpmn_tag_tree.debug_check"):
            assert logger.is_debug_enabled()
        with caplog.at_level(logging.WARNING, logger="bpmn_tag_tree.debug_check"):
            assert not logger.is_debug_enabled()


class TestErrorHierarchy:
    """Test error classes."""

    def test_all_errors_share_base(self):
        """Test every error derives from TagTreeError."""
        for error_class in (
            InvalidConfigError,
            InvalidElementError,
            NoParentError,
            UnknownElementKindError,
        ):
            assert issubclass(error_class, TagTreeError)

    def test_error_details(self):
        """Test field name and suggestions."""
        error = InvalidConfigError("bad", field_name="name", suggestions=["x"])

        assert str(error) == "bad"
        assert error.field_name == "name"
        assert error.suggestions == ["x"]

    def test_error_defaults(self):
        """Test optional details default to empty."""
        error = NoParentError("orphan")

        assert error.field_name is None
        assert error.suggestions == []
