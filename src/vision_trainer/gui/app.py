"""
Entry point for the PySide6 editor.
"""
import logging
import sys
from typing import Optional

logger = logging.getLogger(__name__)


def run(argv: Optional[list[str]] = None, verbose: bool = False) -> int:
    """
    Main entry point for the GUI application.

    Returns:
        The Qt event loop exit code
    """
    from PySide6.QtWidgets import QApplication

    from vision_trainer.gui.main_window import MainWindow
    from vision_trainer.gui.models.settings import load_editor_settings
    from vision_trainer.gui.styles.theme import GLOBAL_STYLESHEET
    from vision_trainer.presets import JsonFileKeyValueStore, PresetStore
    from vision_trainer.utils.logging_utils import configure_logging
    from vision_trainer.utils.paths import APP_NAME, get_storage_path

    configure_logging(verbose)

    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_NAME)
    app.setOrganizationName(APP_NAME)
    app.setStyleSheet(GLOBAL_STYLESHEET)

    storage_path = get_storage_path()
    logger.info(f"Using storage file {storage_path}")
    kv_store = JsonFileKeyValueStore(storage_path)
    store = PresetStore(kv_store)
    store.initialize()

    window = MainWindow(store, kv_store, load_editor_settings(kv_store))
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(run())
