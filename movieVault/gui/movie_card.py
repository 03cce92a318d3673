from __future__ import annotations
from PySide6.QtCore    import Qt, QPropertyAnimation, Signal # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout, QGraphicsDropShadowEffect, QToolButton
)
from shiboken6 import isValid # type: ignore

from ..metadata.core.models import Movie
from ..settings import ACCENT_COLOR, RATING_COLOR, CARD_WIDTH, POSTER_HEIGHT
from .posters   import PosterCache


class MovieCard(QFrame):
    """Grid card: poster with bookmark / info buttons, title, rating, year."""
    bookmark_clicked = Signal(int)
    details_clicked  = Signal(object)

    def __init__(
        self,
        movie: Movie,
        bookmarked: bool,
        posters: PosterCache,
        parent=None,
    ):
        super().__init__(parent)
        self.movie = movie
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.StyledPanel)
        self.setFixedWidth(CARD_WIDTH)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 8)

        # ── poster ───────────────────────────────────────────────────────
        self.poster = QLabel(alignment=Qt.AlignCenter)
        self.poster.setFixedSize(CARD_WIDTH, POSTER_HEIGHT)
        self.poster.setToolTip(movie.title)
        self._set_poster(posters.get(movie.poster_url, self._set_poster))
        root.addWidget(self.poster)

        # ── poster buttons: bookmark (top right) | details ───────────────
        buttons = QHBoxLayout()
        buttons.setContentsMargins(8, 0, 8, 0)
        self.bookmark_btn = QToolButton()
        self.bookmark_btn.setCheckable(True)
        self.bookmark_btn.setCursor(Qt.PointingHandCursor)
        self.set_bookmarked(bookmarked)
        self.bookmark_btn.clicked.connect(lambda: self.bookmark_clicked.emit(self.movie.id))

        info_btn = QToolButton()
        info_btn.setText("ⓘ Details")
        info_btn.setCursor(Qt.PointingHandCursor)
        info_btn.clicked.connect(lambda: self.details_clicked.emit(self.movie))

        buttons.addWidget(self.bookmark_btn, 0, Qt.AlignLeft)
        buttons.addWidget(info_btn,          0, Qt.AlignRight)
        root.addLayout(buttons)

        # ── title ────────────────────────────────────────────────────────
        title = QLabel(movie.title)
        title.setStyleSheet("font-weight:bold; font-size:14px;")
        title.setContentsMargins(8, 0, 8, 0)
        title.setToolTip(movie.title)
        root.addWidget(title)

        # ── footer row: rating | year ───────────────────────────────────
        footer = QHBoxLayout()
        footer.setContentsMargins(8, 0, 8, 0)
        rating = QLabel(f'<span style="color:{RATING_COLOR}">★</span> {movie.rating_label}')
        rating.setTextFormat(Qt.RichText)
        year = QLabel(str(movie.release_year or "—"), alignment=Qt.AlignRight)
        year.setStyleSheet("color:#9ca3af;")
        footer.addWidget(rating, 0, Qt.AlignLeft)
        footer.addWidget(year,   0, Qt.AlignRight)
        root.addLayout(footer)
        root.addStretch()

        # ── hover shadow effect ──────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    def set_bookmarked(self, flag: bool) -> None:
        self.bookmark_btn.setChecked(flag)
        self.bookmark_btn.setText("★ Saved" if flag else "☆ Save")
        self.bookmark_btn.setStyleSheet(f"color:{ACCENT_COLOR};" if flag else "")

    def _set_poster(self, pix: QPixmap) -> None:
        # download callbacks may arrive after a re-render destroyed this card
        if not isValid(self.poster):
            return
        self.poster.setPixmap(
            pix.scaled(CARD_WIDTH, POSTER_HEIGHT, Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation)
        )

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        self._animate_shadow(16)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        self._animate_shadow(4)

    def _animate_shadow(self, radius: int) -> None:
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(radius)
        anim.start(QPropertyAnimation.DeleteWhenStopped)
