"""
Unit tests for logging helpers and path resolution.
"""

import logging
import queue
from pathlib import Path

from vision_trainer.utils import paths
from vision_trainer.utils.logging_utils import attach_queue_handler, detach_queue_handler


class TestQueueLogHandler:
    """Tests for attach_queue_handler() / detach_queue_handler()."""

    def test_attach_when_logging_then_messages_queued_with_level(self):
        # Arrange
        log_queue = queue.Queue()
        handler = attach_queue_handler(log_queue, "vision_trainer.test")
        logger = logging.getLogger("vision_trainer.test.child")
        logger.setLevel(logging.INFO)

        # Act
        try:
            logger.warning("page 2 failed")
        finally:
            detach_queue_handler(handler, "vision_trainer.test")

        # Assert
        assert log_queue.get_nowait() == ("page 2 failed", "WARNING")

    def test_detach_when_logging_after_then_nothing_queued(self):
        log_queue = queue.Queue()
        handler = attach_queue_handler(log_queue, "vision_trainer.test")
        detach_queue_handler(handler, "vision_trainer.test")

        logging.getLogger("vision_trainer.test").warning("ignored")

        assert log_queue.empty()


class TestPaths:
    """Tests for dev-mode path resolution."""

    def test_dev_mode_when_not_frozen_then_workspace_paths(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(paths, "is_frozen", lambda: False)

        assert paths.get_app_data_dir() == Path.cwd() / "workspace"
        assert paths.get_export_dir() == Path.cwd() / "workspace" / "exports"
        assert paths.get_storage_path() == Path.cwd() / "workspace" / "storage.json"
