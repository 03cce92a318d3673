import os
import sys
from PySide6.QtWidgets import QApplication

from movieVault.settings        import APP_NAME, BOOKMARKS_PATH, DISCARD_STALE_RESPONSES
from movieVault.utils           import log_debug
from movieVault.metadata        import BookmarkRepo, TMDBClient, VaultStore
from movieVault.gui.controller  import VaultController
from movieVault.gui.main_window import MainWindow
from movieVault.gui.painting    import apply_dark_palette
from movieVault.gui.posters     import PosterCache
from movieVault.gui.workers     import QtRunner


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    apply_dark_palette(app)

    # -------- state + collaborators ----------------------------------
    bookmarks = BookmarkRepo(BOOKMARKS_PATH).load()
    store     = VaultStore(bookmarks, discard_stale=DISCARD_STALE_RESPONSES)
    client    = TMDBClient()
    runner    = QtRunner()
    posters   = PosterCache(client.poster_bytes, runner)

    # -------- controller + window -------------------------------------
    controller = VaultController(store, client, runner)
    window     = MainWindow(store, controller, posters)
    controller.notify = window.show_notice
    window.show()

    controller.start()
    log_debug("MovieVault started")

    # -------- run the event-loop -------------------------------------
    code = app.exec()
    if not runner.shutdown():
        # a hung request still owns a QThread; skip interpreter teardown
        os._exit(code)
    sys.exit(code)

# Python entry-point guard
if __name__ == "__main__":
    main()
