from __future__ import annotations
from itertools import count
from typing import Callable, Dict, Tuple

from PySide6.QtCore import QObject, QThread, Signal, Slot

from movieVault.utils import log_debug


# ───────────────────────── Worker skeleton ────────────────────────────────
class _JobWorker(QObject):
    """Runs one callable on its own QThread and reports the outcome."""
    done   = Signal(int, object)
    failed = Signal(int, object)

    def __init__(self, token: int, job: Callable[[], object]):
        super().__init__()
        self.token = token
        self.job = job

    @Slot()
    def run(self):
        try:
            result = self.job()
        except Exception as exc:
            self.failed.emit(self.token, exc)
        else:
            self.done.emit(self.token, result)


class QtRunner(QObject):
    """Background runner handed to the controller.

    Lives on the GUI thread; workers signal back through queued
    connections, so the callbacks always run on the GUI thread. Jobs are
    never cancelled.
    """

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self._tokens = count(1)
        self._jobs: Dict[int, Tuple[QThread, _JobWorker]] = {}
        self._callbacks: Dict[int, Tuple[Callable, Callable]] = {}

    def __call__(self, job, on_done, on_error) -> None:
        token = next(self._tokens)
        thr = QThread()
        worker = _JobWorker(token, job)
        worker.moveToThread(thr)

        worker.done.connect(self._on_done)
        worker.failed.connect(self._on_failed)
        worker.done.connect(thr.quit)
        worker.failed.connect(thr.quit)
        thr.started.connect(worker.run)
        thr.finished.connect(lambda t=token: self._release(t))

        self._jobs[token] = (thr, worker)
        self._callbacks[token] = (on_done, on_error)
        thr.start()

    @Slot(int, object)
    def _on_done(self, token: int, result: object) -> None:
        on_done, _ = self._callbacks.pop(token, (None, None))
        if on_done is not None:
            on_done(result)

    @Slot(int, object)
    def _on_failed(self, token: int, exc: object) -> None:
        _, on_error = self._callbacks.pop(token, (None, None))
        if on_error is not None:
            on_error(exc)

    def _release(self, token: int) -> None:
        thr, worker = self._jobs.pop(token, (None, None))
        if worker is not None:
            worker.deleteLater()
        if thr is not None:
            thr.deleteLater()

    def shutdown(self, wait_ms: int = 2000) -> bool:
        """Stop accepting results and give running threads a moment to exit.

        Returns False when a job is still blocked (e.g. a request without a
        timeout). Its QThread is kept referenced here; destroying it while
        it runs aborts the process, so the caller must not tear down the
        interpreter normally.
        """
        self._callbacks.clear()
        stopped = True
        for token, (thr, _worker) in list(self._jobs.items()):
            thr.quit()
            if not thr.wait(wait_ms):
                log_debug(f"runner: job {token} still running at shutdown")
                stopped = False
        return stopped
