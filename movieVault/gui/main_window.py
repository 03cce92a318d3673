# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Qt, Slot
from PySide6.QtGui     import QAction
from PySide6.QtWidgets import (
    QGridLayout, QLineEdit, QMainWindow, QScrollArea, QSizePolicy,
    QStackedWidget, QToolBar, QWidget,
)

from movieVault.settings            import APP_NAME, ACCENT_COLOR, CARD_WIDTH, NOTICE_MS
from movieVault.metadata.core.models import LoadPhase, Movie
from movieVault.metadata.core.store  import VaultStore
from movieVault.gui.controller      import VaultController
from movieVault.gui.detail_dialog   import MovieDetailDialog
from movieVault.gui.movie_card      import MovieCard
from movieVault.gui.pages           import EmptyBookmarksPage, LoadingPage, MessagePage
from movieVault.gui.posters         import PosterCache

GRID_SPACING = 24


class MainWindow(QMainWindow):
    """Renders ``VaultStore`` and forwards user input to ``VaultController``."""

    def __init__(self, store: VaultStore, controller: VaultController, posters: PosterCache):
        super().__init__()
        self.store = store
        self.controller = controller
        self.posters = posters
        self._cards: dict[int, MovieCard] = {}
        self._grid_key: tuple | None = None
        self._dialog: MovieDetailDialog | None = None

        self.setWindowTitle(APP_NAME)
        self._build_header()
        self._build_pages()
        self.resize(1200, 800)

        store.subscribe(self.render)
        self.render()

    # ── header ──────────────────────────────────────────────────────────
    def _build_header(self) -> None:
        tb = QToolBar("Header")
        tb.setMovable(False)
        self.addToolBar(tb)

        self.home_action = QAction(f"⌂ {APP_NAME}", self)
        self.home_action.setShortcut("Ctrl+R")
        self.home_action.setToolTip("Trending this week")
        self.home_action.triggered.connect(lambda _checked=False: self.controller.show_trending())
        tb.addAction(self.home_action)
        tb.widgetForAction(self.home_action).setStyleSheet(
            f"font-size:20px; font-weight:bold; color:{ACCENT_COLOR};"
        )

        self.bookmarks_action = QAction("☆ Bookmarks", self)
        self.bookmarks_action.setCheckable(True)
        self.bookmarks_action.setShortcut("Ctrl+B")
        self.bookmarks_action.triggered.connect(lambda _checked: self.controller.toggle_bookmarks_only())
        tb.addAction(self.bookmarks_action)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        tb.addWidget(spacer)

        self.search_input = QLineEdit(placeholderText="Search movies...")
        self.search_input.setClearButtonEnabled(True)
        self.search_input.setMinimumWidth(360)
        # textEdited ignores programmatic setText, so state syncs don't loop
        self.search_input.textEdited.connect(self.controller.search)
        tb.addWidget(self.search_input)

    # ── stacked pages ───────────────────────────────────────────────────
    def _build_pages(self) -> None:
        self.loading_page = LoadingPage()
        self.message_page = MessagePage()
        self.empty_page   = EmptyBookmarksPage()
        self.empty_page.browse_trending.connect(self.controller.show_trending)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        container = QWidget()
        self.grid_layout = QGridLayout(container)
        self.grid_layout.setSpacing(GRID_SPACING)
        self.grid_layout.setAlignment(Qt.AlignTop | Qt.AlignHCenter)
        self.scroll_area.setWidget(container)

        self.pages = QStackedWidget()
        for page in (self.loading_page, self.message_page, self.empty_page, self.scroll_area):
            self.pages.addWidget(page)
        self.setCentralWidget(self.pages)

    # ───────────────────────────────────────────────────────────────────
    @Slot()
    def render(self) -> None:
        st = self.store.state

        if self.search_input.text() != st.search_text:
            self.search_input.setText(st.search_text)
        self.bookmarks_action.setChecked(st.bookmarks_only)
        self.bookmarks_action.setText("★ Bookmarks" if st.bookmarks_only else "☆ Bookmarks")

        displayed = self.store.displayed_movies()
        if st.phase is LoadPhase.LOADING:
            self.pages.setCurrentWidget(self.loading_page)
        elif st.error.is_error:
            self.message_page.show_error(st.error)
            self.pages.setCurrentWidget(self.message_page)
        elif st.bookmarks_only and not displayed:
            self.pages.setCurrentWidget(self.empty_page)
        else:
            self._populate_grid(displayed)
            self.pages.setCurrentWidget(self.scroll_area)

        self._sync_dialog(st.selected)

    def _columns(self) -> int:
        usable = self.scroll_area.viewport().width() - GRID_SPACING
        return max(1, usable // (CARD_WIDTH + GRID_SPACING))

    def _populate_grid(self, movies: list[Movie]) -> None:
        key = (tuple(m.id for m in movies), self._columns())
        if key == self._grid_key:
            for mid, card in self._cards.items():
                card.set_bookmarked(self.store.is_bookmarked(mid))
            return
        self._grid_key = key

        while self.grid_layout.count():
            item = self.grid_layout.takeAt(0)
            if widget := item.widget():
                widget.deleteLater()
        self._cards.clear()

        cols = key[1]
        for idx, movie in enumerate(movies):
            card = MovieCard(movie, self.store.is_bookmarked(movie.id), self.posters)
            card.bookmark_clicked.connect(self.controller.toggle_bookmark)
            card.details_clicked.connect(self.controller.open_details)
            self.grid_layout.addWidget(card, idx // cols, idx % cols)
            self._cards[movie.id] = card

    # ── detail modal ────────────────────────────────────────────────────
    def _sync_dialog(self, selected: Movie | None) -> None:
        if self._dialog is not None:
            if selected is not None and selected.id == self._dialog.movie.id:
                self._dialog.set_bookmarked(self.store.is_bookmarked(selected.id))
                return
            dlg, self._dialog = self._dialog, None
            dlg.close()
        if selected is None:
            return

        dlg = MovieDetailDialog(selected, self.store.is_bookmarked(selected.id), self.posters, self)
        dlg.bookmark_clicked.connect(self.controller.toggle_bookmark)
        dlg.finished.connect(lambda _result, d=dlg: self._on_dialog_finished(d))
        self._dialog = dlg
        dlg.open()

    def _on_dialog_finished(self, dlg: MovieDetailDialog) -> None:
        if self._dialog is dlg:
            self._dialog = None
        dlg.deleteLater()
        selected = self.store.state.selected
        if selected is not None and selected.id == dlg.movie.id:
            self.controller.close_details()

    # ── notifications ───────────────────────────────────────────────────
    @Slot(str, str)
    def show_notice(self, level: str, text: str) -> None:
        mark = "✗" if level == "error" else "✓"
        colour = "#f87171" if level == "error" else "#4ade80"
        self.statusBar().setStyleSheet(f"color:{colour};")
        self.statusBar().showMessage(f"{mark} {text}", NOTICE_MS)

    # ------------------------------------------------------------------
    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self.pages.currentWidget() is self.scroll_area and self._grid_key is not None:
            if self._columns() != self._grid_key[1]:
                self._populate_grid(self.store.displayed_movies())

    def closeEvent(self, event):
        self.store.unsubscribe(self.render)
        super().closeEvent(event)
