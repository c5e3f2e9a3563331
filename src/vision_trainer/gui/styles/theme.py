"""
Theme definitions for the Vision Trainer editor.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    CANVAS_BACKDROP = "#e5e7eb"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders
    BORDER = "#e0e0e0"

    # Status
    ERROR = "#d32f2f"
    SUCCESS = "#388e3c"

    # Page overlays
    SELECTION = "#2563eb"
    GRID_CENTER = "#ef4444"


GLOBAL_STYLESHEET = f"""
QMainWindow, QWidget {{
    background-color: {Colors.BACKGROUND};
    color: {Colors.TEXT_PRIMARY};
}}
QGroupBox {{
    background-color: {Colors.SURFACE};
    border: 1px solid {Colors.BORDER};
    border-radius: 8px;
    margin-top: 14px;
    padding: 10px;
    font-weight: bold;
}}
QGroupBox::title {{
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 4px;
}}
QPushButton {{
    background-color: {Colors.PRIMARY_BLUE};
    color: {Colors.TEXT_ON_PRIMARY};
    border: none;
    border-radius: 4px;
    padding: 6px 12px;
}}
QPushButton:hover {{
    background-color: {Colors.PRIMARY_BLUE_HOVER};
}}
QPushButton:disabled {{
    background-color: {Colors.BORDER};
    color: {Colors.TEXT_SECONDARY};
}}
QLabel#errorLabel {{
    color: {Colors.ERROR};
    font-weight: normal;
}}
"""
