from __future__ import annotations
from collections import OrderedDict
from typing import Callable, Dict, List

from PySide6.QtGui import QPixmap # type: ignore

from movieVault.gui.painting import make_placeholder_pixmap, pixmap_from_bytes
from movieVault.settings import CARD_WIDTH, POSTER_CACHE_SIZE, POSTER_HEIGHT
from movieVault.utils import log_debug


class PosterCache:
    """In-memory poster pixmaps keyed by URL, downloaded through the runner.

    Concurrent requests for the same URL share one download. Failed or
    undecodable downloads are cached as the placeholder so a broken
    poster is not retried on every re-render. At most ``capacity``
    pixmaps are kept; the least recently used one is dropped first.
    """

    def __init__(
        self,
        fetch: Callable[[str], bytes],
        runner,
        capacity: int = POSTER_CACHE_SIZE,
        placeholder: QPixmap | None = None,
        decode: Callable[[bytes], QPixmap | None] = pixmap_from_bytes,
    ):
        self._fetch = fetch
        self._runner = runner
        self._decode = decode
        self.capacity = max(1, capacity)
        self._pixmaps: "OrderedDict[str, QPixmap]" = OrderedDict()
        self._waiting: Dict[str, List[Callable[[QPixmap], None]]] = {}
        self.placeholder = placeholder if placeholder is not None else \
            make_placeholder_pixmap(CARD_WIDTH, POSTER_HEIGHT)

    def __len__(self) -> int:
        return len(self._pixmaps)

    def get(self, url: str | None, callback: Callable[[QPixmap], None]) -> QPixmap:
        """Return what is available now; *callback* fires later if a download starts."""
        if not url:
            return self.placeholder
        if url in self._pixmaps:
            self._pixmaps.move_to_end(url)
            return self._pixmaps[url]

        waiting = self._waiting.setdefault(url, [])
        waiting.append(callback)
        if len(waiting) == 1:
            self._runner(
                lambda: self._fetch(url),
                lambda data: self._finish(url, self._decode(data)),
                lambda exc: self._fail(url, exc),
            )
        return self.placeholder

    def _fail(self, url: str, exc: BaseException) -> None:
        log_debug(f"poster {url}: {exc}")
        self._finish(url, None)

    def _finish(self, url: str, pix: QPixmap | None) -> None:
        pix = pix or self.placeholder
        self._pixmaps[url] = pix
        self._pixmaps.move_to_end(url)
        while len(self._pixmaps) > self.capacity:
            self._pixmaps.popitem(last=False)
        # callbacks of cards destroyed meanwhile are dropped with the list
        for cb in self._waiting.pop(url, []):
            cb(pix)
