"""Unit tests for structured logging."""

import json
import logging

import pytest
import structlog
from structlog.testing import LogCapture

from buildlink.core.config import Config
from buildlink.core.exceptions import MissingPrerequisiteError
from buildlink.core.logging import (
    add_link_pass,
    bind_link_pass,
    clear_link_pass,
    get_logger,
    setup_logging,
)
from buildlink.linking.driver import DeferredLinkDriver
from buildlink.models.software import AndroidLibraryModel


@pytest.fixture
def link_pass():
    """Run the test inside a link pass of ``:core:network``.

    Yields:
        None. The pass is cleared afterwards.
    """
    bind_link_pass(":core:network", "linking")
    yield
    clear_link_pass()


@pytest.fixture
def restore_root_logger():
    """Restore the root logger's handlers and level after the test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def captured_logs():
    """Capture structured log entries after link pass stamping.

    Returns:
        LogCapture: Collects the entries emitted during the test.
    """
    capture = LogCapture()
    structlog.configure(
        processors=[add_link_pass, capture],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
    )
    return capture


class TestLinkPassStamping:
    """Tests for the link pass processor."""

    def test_entries_are_stamped(self, link_pass):
        event = add_link_pass(None, "info", {"event": "Feature enabled"})
        assert event == {"event": "Feature enabled", "project": ":core:network", "link_state": "linking"}

    def test_explicit_keys_win(self, link_pass):
        event = add_link_pass(None, "info", {"event": "x", "project": ":app"})
        assert event["project"] == ":app"
        assert event["link_state"] == "linking"

    def test_no_stamp_outside_a_pass(self):
        clear_link_pass()
        assert add_link_pass(None, "info", {"event": "x"}) == {"event": "x"}

    def test_driver_entries_carry_link_state(self, captured_logs, library_driver, project):
        """Test the stamping during a real link pass.

        Verifies that entries emitted by the linking steps carry the project
        path and the state of the pass, and that the stamp is cleared once
        the pass is over.
        """
        library_driver.configure(lambda model: model.compose.enabled.set(True))
        project.evaluate()
        get_logger("buildlink.test").info("After link")

        by_event = {entry["event"]: entry for entry in captured_logs.entries}
        assert by_event["Feature enabled"]["link_state"] == "linking"
        assert by_event["Feature enabled"]["project"] == ":core:network"
        assert by_event["Link completed"]["link_state"] == "linked"
        assert "link_state" not in by_event["After link"]

    def test_failed_pass_is_stamped_failed(self, captured_logs, project):
        driver = DeferredLinkDriver(project, AndroidLibraryModel())
        driver.apply()
        with pytest.raises(MissingPrerequisiteError):
            project.evaluate()

        (failed,) = [e for e in captured_logs.entries if e["event"] == "Link failed"]
        assert failed["link_state"] == "failed"
        assert failed["log_level"] == "error"


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_json_lines_on_stderr(self, capsys, restore_root_logger, link_pass):
        """Test the non-terminal output.

        Verifies that entries are rendered as JSON on stderr with level,
        timestamp, logger name and the link pass stamp.
        """
        setup_logging(Config(log_level="DEBUG"))
        get_logger("buildlink.test").info("Bucket merged", bucket="implementation", count=2)

        (line,) = capsys.readouterr().err.strip().splitlines()
        entry = json.loads(line)
        assert entry["event"] == "Bucket merged"
        assert entry["level"] == "info"
        assert entry["logger"] == "buildlink.test"
        assert entry["bucket"] == "implementation"
        assert entry["project"] == ":core:network"
        assert entry["link_state"] == "linking"
        assert "timestamp" in entry

    def test_level_filters_entries(self, capsys, restore_root_logger):
        setup_logging(Config(log_level="WARNING"))
        logger = get_logger("buildlink.test")
        logger.info("hidden")
        logger.warning("shown")

        lines = capsys.readouterr().err.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["shown"]

    def test_stdlib_records_share_the_format(self, capsys, restore_root_logger):
        setup_logging(Config(log_level="INFO"))
        logging.getLogger("buildlink.stdlib").warning("plain %s", "record")

        entry = json.loads(capsys.readouterr().err.strip())
        assert entry["event"] == "plain record"
        assert entry["level"] == "warning"
