"""Background layout computation where the newest request wins."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional

from .graph import AdjacencyLike
from .layout import compute_layout
from .model import CancelToken, LayoutCancelled, LayoutOptions, LayoutResult

logger = logging.getLogger(__name__)

LayoutFunc = Callable[..., LayoutResult]
ResultCallback = Callable[[LayoutResult], None]


class LayoutWorker:
    """Run layouts on one dedicated thread, cancelling superseded requests.

    Every :meth:`submit` cancels the tokens of all earlier requests. A
    superseded request's future fails with :class:`LayoutCancelled` and its
    callback is never called, even when the computation had already finished.
    A delivery that has started runs to completion before a newer request is
    accepted.
    """

    def __init__(self, compute: LayoutFunc = compute_layout) -> None:
        self._compute = compute
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="gridcross-layout")
        # Held across the staleness check and the callback, so a concurrent
        # submit waits until an in-flight delivery has finished. Reentrant so
        # a callback may submit follow-up work.
        self._lock = threading.RLock()
        self._generation = 0
        self._tokens: List[CancelToken] = []
        self._closed = False

    def submit(
        self,
        vertex_count: int,
        edge_count: int,
        adjacency: AdjacencyLike,
        heuristic_choice: int = 0,
        *,
        options: Optional[LayoutOptions] = None,
        callback: Optional[ResultCallback] = None,
    ) -> "Future[LayoutResult]":
        token = CancelToken()
        with self._lock:
            if self._closed:
                raise RuntimeError("cannot submit to a closed LayoutWorker")
            for stale in self._tokens:
                stale.cancel()
            self._generation += 1
            generation = self._generation
            self._tokens = [token]
            logger.debug("Submitting layout request generation=%d V=%d", generation, vertex_count)

        def _run() -> LayoutResult:
            token.raise_if_cancelled()
            result = self._compute(
                vertex_count,
                edge_count,
                adjacency,
                heuristic_choice,
                options=options,
                cancel_token=token,
            )
            with self._lock:
                if token.cancelled or generation != self._generation:
                    logger.debug("Discarding superseded layout generation=%d", generation)
                    raise LayoutCancelled(f"layout request {generation} was superseded")
                if callback is not None:
                    callback(result)
            return result

        return self._executor.submit(_run)

    def cancel_pending(self) -> None:
        with self._lock:
            for token in self._tokens:
                token.cancel()
            self._tokens = []
            self._generation += 1

    def shutdown(self, wait: bool = True) -> None:
        with self._lock:
            self._closed = True
        self.cancel_pending()
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "LayoutWorker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


__all__ = ["LayoutWorker"]
