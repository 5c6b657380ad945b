"""Unit tests for observability helpers."""

import logging
import os
from unittest.mock import Mock, patch

import pytest
from pythonjsonlogger import jsonlogger

from menu_designer.observability.config import configure_logging, setup_observability
from menu_designer.observability.decorators import traced
from menu_designer.observability.metrics import record_menu_generated


@pytest.mark.unit
class TestTraced:
    """Tests for the traced decorator."""

    def test_returns_result(self) -> None:
        """Test that the wrapped function's result is returned."""

        @traced("double")
        def double(x: int) -> int:
            return x * 2

        assert double(4) == 8
        assert double.__name__ == "double"

    def test_reraises_errors(self) -> None:
        """Test that exceptions propagate unchanged."""

        @traced()
        def fail() -> None:
            raise ValueError("bad input")

        with pytest.raises(ValueError, match="bad input"):
            fail()


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def teardown_method(self) -> None:
        """Restore a plain root logger."""
        root = logging.getLogger()
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        root.setLevel(logging.WARNING)

    @patch.dict(os.environ, {}, clear=True)
    def test_installs_single_json_handler(self) -> None:
        """Test that the root logger gets one JSON formatted handler."""
        logging.getLogger().addHandler(logging.NullHandler())

        configure_logging("DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)

    @patch.dict(os.environ, {"LOG_LEVEL": "error"}, clear=True)
    def test_environment_overrides_argument(self) -> None:
        """Test that LOG_LEVEL wins over the argument."""
        configure_logging("DEBUG")

        assert logging.getLogger().level == logging.ERROR


@pytest.mark.unit
class TestSetupObservability:
    """Tests for setup_observability."""

    @patch.dict(os.environ, {"ENVIRONMENT": "test"}, clear=True)
    @patch("menu_designer.observability.config.setup_metrics")
    @patch("menu_designer.observability.config.setup_tracing")
    @patch("menu_designer.observability.config.FastAPIInstrumentor")
    def test_test_environment_never_exports(
        self, mock_instrumentor: Mock, mock_tracing: Mock, mock_metrics: Mock
    ) -> None:
        """Test that exporters stay off under ENVIRONMENT=test."""
        app = object()

        setup_observability(app, enable_exporters=True)

        mock_tracing.assert_not_called()
        mock_metrics.assert_not_called()
        mock_instrumentor.instrument_app.assert_called_once_with(app)

    @patch.dict(
        os.environ,
        {"ENVIRONMENT": "production", "OTEL_EXPORTER_OTLP_ENDPOINT": "http://collector:4318"},
        clear=True,
    )
    @patch("menu_designer.observability.config.setup_metrics")
    @patch("menu_designer.observability.config.setup_tracing")
    def test_exporters_enabled(self, mock_tracing: Mock, mock_metrics: Mock) -> None:
        """Test that exporters are configured with the OTLP endpoint."""
        setup_observability(enable_exporters=True)

        assert mock_tracing.call_args.args[1] == "http://collector:4318"
        assert mock_metrics.call_args.args[1] == "http://collector:4318"


@pytest.mark.unit
class TestMetrics:
    """Tests for metric recording helpers."""

    @patch("menu_designer.observability.metrics.menu_size_histogram")
    @patch("menu_designer.observability.metrics.generation_duration_histogram")
    @patch("menu_designer.observability.metrics.menus_generated_counter")
    def test_menu_generated_keeps_attributes_low_cardinality(
        self, mock_counter: Mock, mock_duration: Mock, mock_size: Mock
    ) -> None:
        """Test that dish count is a recorded value, never an attribute."""
        record_menu_generated("Italian", 9, 0.25)

        mock_counter.add.assert_called_once_with(1, {"cuisine": "Italian"})
        mock_duration.record.assert_called_once_with(0.25, {"cuisine": "Italian"})
        mock_size.record.assert_called_once_with(9, {"cuisine": "Italian"})
