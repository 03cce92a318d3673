from __future__ import annotations
from PySide6.QtCore    import Qt, Signal, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QLabel, QProgressBar, QPushButton
)

from ..metadata.core.models import ErrorState
from ..utils import open_url_host_browser


# -------------------------------------------------------------------------
class LoadingPage(QWidget):
    """Centred busy bar shown while a request is outstanding."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        box = QVBoxLayout(self)
        box.setAlignment(Qt.AlignCenter)

        self.bar = QProgressBar()
        self.bar.setRange(0, 0)           # busy
        self.bar.setFixedWidth(240)
        self.bar.setTextVisible(False)
        box.addWidget(QLabel("Loading…", alignment=Qt.AlignCenter))
        box.addWidget(self.bar)


# -------------------------------------------------------------------------
class MessagePage(QWidget):
    """Error slot: message, plus set-up steps for a missing API key."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        box = QVBoxLayout(self)
        box.setAlignment(Qt.AlignCenter)

        self.message = QLabel(alignment=Qt.AlignCenter)
        self.message.setWordWrap(True)
        self.message.setStyleSheet("color:#9ca3af; font-size:16px;")

        self.steps = QLabel(alignment=Qt.AlignLeft)
        self.steps.setTextFormat(Qt.RichText)
        self.steps.setOpenExternalLinks(False)
        self.steps.linkActivated.connect(open_url_host_browser)
        self.steps.setStyleSheet("color:#6b7280;")

        box.addWidget(self.message)
        box.addWidget(self.steps, 0, Qt.AlignHCenter)

    @Slot(object)
    def show_error(self, error: ErrorState) -> None:
        self.message.setText(error.message or "")
        if error.instructions:
            items = "".join(f"<li>{step}</li>" for step in error.instructions)
            self.steps.setText(f"<p>To get your TMDB API key:</p><ol>{items}</ol>")
            self.steps.show()
        else:
            self.steps.clear()
            self.steps.hide()


# -------------------------------------------------------------------------
class EmptyBookmarksPage(QWidget):
    """Shown when the bookmarks-only filter leaves nothing to display."""
    browse_trending = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        box = QVBoxLayout(self)
        box.setAlignment(Qt.AlignCenter)

        icon = QLabel("☆", alignment=Qt.AlignCenter)
        icon.setStyleSheet("font-size:48px; color:#6b7280;")
        text = QLabel("No bookmarked movies yet", alignment=Qt.AlignCenter)
        text.setStyleSheet("color:#9ca3af; font-size:16px;")
        btn = QPushButton("Browse trending movies")
        btn.setFlat(True)
        btn.setCursor(Qt.PointingHandCursor)
        btn.clicked.connect(self.browse_trending)

        box.addWidget(icon)
        box.addWidget(text)
        box.addWidget(btn, 0, Qt.AlignHCenter)
