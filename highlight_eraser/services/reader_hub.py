from PySide6.QtCore import QObject, Signal


class ReaderHub(QObject):
    """Signals the host reader broadcasts to its plugins."""
    key_pressed = Signal(str)
    key_released = Signal(str)
    suspended = Signal()
    resumed = Signal()
    config_menu_opening = Signal()
    document_closed = Signal()
    reader_ready = Signal()
    refresh_additional_content = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
