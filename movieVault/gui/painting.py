from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QPixmap, QPainter, QFont, QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieVault.settings import ACCENT_COLOR


def make_placeholder_pixmap(
    width: int,
    height: int,
    text: str = "No Image",
    fg_color: str = "#9ca3af",
    bg_color: str = "#374151",
) -> QPixmap:
    """Poster stand-in: flat rectangle with centred *text*."""
    pix = QPixmap(width, height)
    pix.fill(QColor(bg_color))

    painter = QPainter(pix)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setFont(QFont("Arial", max(10, width // 12), QFont.Bold))
    painter.setPen(QColor(fg_color))
    painter.drawText(pix.rect(), Qt.AlignCenter, text)
    painter.end()
    return pix


def pixmap_from_bytes(data: bytes | None) -> QPixmap | None:
    """Decode downloaded image bytes; None if Qt can't read them."""
    if not data:
        return None
    pix = QPixmap()
    return pix if pix.loadFromData(data) else None


def apply_dark_palette(app: QApplication) -> None:
    """Apply a dark Fusion palette to the application."""
    palette = QPalette()
    palette.setColor(QPalette.Window,        QColor("#111827"))
    palette.setColor(QPalette.WindowText,    Qt.white)
    palette.setColor(QPalette.Base,          QColor("#374151"))
    palette.setColor(QPalette.AlternateBase, QColor("#1f2937"))
    palette.setColor(QPalette.Button,        QColor("#374151"))
    palette.setColor(QPalette.ButtonText,    Qt.white)
    palette.setColor(QPalette.Text,          Qt.white)
    palette.setColor(QPalette.Link,          QColor(ACCENT_COLOR))
    palette.setColor(QPalette.Highlight,     QColor(ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)
