"""PySide6 editor for vision-training charts."""
