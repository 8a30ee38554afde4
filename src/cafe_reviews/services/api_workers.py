"""Async workers for non-blocking provider calls using Qt threading."""

from typing import Callable

from PySide6.QtCore import QObject, QRunnable, Signal, Slot


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    result = Signal(object)


class ProviderWorker(QRunnable):
    """
    Worker that runs one provider-backed call in a background thread.

    Uses Qt's thread pool for efficient thread management. The call's
    return value is emitted through signals.result; anything it raises is
    turned into signals.error so the GUI thread never sees an uncaught fault.
    """

    def __init__(self, task: Callable[[], object], description: str = "provider call"):
        super().__init__()
        self.task = task
        self.description = description
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the call in the background thread."""
        try:
            result = self.task()
            self.signals.result.emit(result)
        except Exception as e:
            self.signals.error.emit(f"Unexpected error during {self.description}: {str(e)}")
        finally:
            self.signals.finished.emit()
