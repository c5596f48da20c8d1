from typing import Protocol

from logly import logger
from PySide6.QtCore import QRunnable, QThreadPool

from pd.application.sources import SANDBOXED, SYSTEM_REPO, USER_REPO
from pd.core.errors import AdapterError
from pd.core.package_types import PackageRecord, SearchResults


class Searchable(Protocol):
    name: str

    def search(self, term: str) -> list[PackageRecord]: ...


class SearchTask(QRunnable):
    """Runs one source's search on a pool thread and keeps the records.

    A failing search leaves `records` empty; the error is logged and never
    leaves the worker thread.
    """

    def __init__(self, source: Searchable, term: str):
        super().__init__()
        # The pool must not delete the task: results are read after the join.
        self.setAutoDelete(False)
        self._source = source
        self._term = term
        self.records: list[PackageRecord] = []

    def run(self) -> None:
        try:
            self.records = self._source.search(self._term)
            logger.info(f"Search finished source={self._source.name} hits={len(self.records)}")
        except AdapterError as e:
            logger.warning(f"Search failed source={self._source.name}: {e}")
            self.records = []
        except Exception:
            logger.exception(f"Search crashed source={self._source.name}")
            self.records = []


def aggregate(
    term: str,
    system: Searchable = SYSTEM_REPO,
    user: Searchable = USER_REPO,
    sandboxed: Searchable = SANDBOXED,
) -> SearchResults:
    """Searches all sources concurrently and collects their records.

    Every source runs on its own pool thread; the call returns once all of them
    have finished. A source that fails contributes an empty list.

    Args:
        term: Search term passed verbatim to each source.
        system: System repository source.
        user: User repository source.
        sandboxed: Sandboxed application store source.

    Returns:
        The records of each source, in `(system, user, sandboxed)` order.
    """
    tasks = [SearchTask(source, term) for source in (system, user, sandboxed)]

    pool = QThreadPool()
    pool.setMaxThreadCount(len(tasks))
    for task in tasks:
        pool.start(task)
    pool.waitForDone()

    system_task, user_task, sandboxed_task = tasks
    return SearchResults(
        system=system_task.records,
        user=user_task.records,
        sandboxed=sandboxed_task.records,
    )
