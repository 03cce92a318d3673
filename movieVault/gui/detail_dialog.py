from __future__ import annotations
from PySide6.QtCore    import Qt, Signal # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QDialog, QHBoxLayout, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget
)
from shiboken6 import isValid # type: ignore

from ..metadata.core.models import Movie
from ..settings import ACCENT_COLOR, RATING_COLOR
from .posters   import PosterCache

DETAIL_POSTER_HEIGHT = 400


class MovieDetailDialog(QDialog):
    """Modal overlay with everything the list response carried for *movie*.

    Nothing extra is fetched. The trailer button stays disabled: there
    is no trailer lookup behind it.
    """
    bookmark_clicked = Signal(int)

    def __init__(self, movie: Movie, bookmarked: bool, posters: PosterCache, parent: QWidget | None = None):
        super().__init__(parent)
        self.movie = movie
        self.setWindowTitle(movie.title)
        self.setModal(True)
        self.resize(640, 720)

        outer = QVBoxLayout(self)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        body = QWidget()
        root = QVBoxLayout(body)
        scroll.setWidget(body)
        outer.addWidget(scroll)

        self.poster = QLabel(alignment=Qt.AlignCenter)
        self.poster.setFixedHeight(DETAIL_POSTER_HEIGHT)
        self._set_poster(posters.get(movie.poster_url, self._set_poster))
        root.addWidget(self.poster)

        title = QLabel(movie.title)
        title.setWordWrap(True)
        title.setStyleSheet("font-size:22px; font-weight:bold;")
        root.addWidget(title)

        meta = QLabel(
            f'<span style="color:{RATING_COLOR}">★</span> {movie.rating_label}'
            f'&nbsp;&nbsp;<span style="color:#9ca3af">{movie.release_year or ""}</span>'
        )
        meta.setTextFormat(Qt.RichText)
        root.addWidget(meta)

        overview = QLabel(movie.overview or "No overview available.")
        overview.setWordWrap(True)
        overview.setStyleSheet("color:#d1d5db;")
        root.addWidget(overview)
        root.addStretch()

        # ── actions ────────────────────────────────────────────────────
        actions = QHBoxLayout()
        trailer_btn = QPushButton("▶ Watch Trailer")
        trailer_btn.setEnabled(False)
        trailer_btn.setToolTip("Trailers are not available yet")
        self.bookmark_btn = QPushButton()
        self.bookmark_btn.clicked.connect(lambda: self.bookmark_clicked.emit(self.movie.id))
        self.set_bookmarked(bookmarked)
        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)

        actions.addWidget(trailer_btn)
        actions.addWidget(self.bookmark_btn)
        actions.addStretch()
        actions.addWidget(close_btn)
        outer.addLayout(actions)

    def set_bookmarked(self, flag: bool) -> None:
        self.bookmark_btn.setText("★ Bookmarked" if flag else "☆ Bookmark")
        self.bookmark_btn.setStyleSheet(f"color:{ACCENT_COLOR};" if flag else "")

    def _set_poster(self, pix: QPixmap) -> None:
        if not isValid(self.poster):
            return
        self.poster.setPixmap(pix.scaledToHeight(DETAIL_POSTER_HEIGHT, Qt.SmoothTransformation))
