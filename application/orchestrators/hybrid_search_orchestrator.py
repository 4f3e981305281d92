from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog
from returns.result import Failure

from application.dtos.search_dtos import SearchSnapshot
from domain.value_objects.search_source import SearchSource

if TYPE_CHECKING:
    from application.ports.scheduler import Scheduler, TimerHandle
    from application.use_cases.compound_resolution_use_cases import ResolveCompoundQueryUseCase
    from domain.services.local_index import LocalIndex
    from domain.value_objects.compound_record import CompoundRecord

logger = structlog.get_logger()

DEFAULT_DEBOUNCE_MS = 200
DEFAULT_REMOTE_LIMIT = 50

SnapshotListener = Callable[[SearchSnapshot], None]


class HybridSearchOrchestrator:
    """Two-phase search over a live query string.

    Every query change is answered at once from the local index. After a
    quiet period with no further change, the remote resolution runs for the
    current query and its results are appended, minus anything the local
    index already returned.

    Each query change starts a new generation. Remote results are applied
    only if their generation is still current, so a slow response for an
    old query can never overwrite the state of a newer one.
    """

    def __init__(  # noqa: PLR0913
        self,
        local_index: LocalIndex,
        resolve_query_use_case: ResolveCompoundQueryUseCase,
        scheduler: Scheduler,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        remote_limit: int = DEFAULT_REMOTE_LIMIT,
    ) -> None:
        self.local_index = local_index
        self.resolve_query = resolve_query_use_case
        self.scheduler = scheduler
        self.debounce_ms = debounce_ms
        self.remote_limit = remote_limit

        self._generation = 0
        self._pending: TimerHandle | None = None
        self._snapshot = SearchSnapshot()
        self._listeners: list[SnapshotListener] = []

    @property
    def snapshot(self) -> SearchSnapshot:
        return self._snapshot

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a listener called with every new snapshot.

        Returns:
            A function that removes the listener again.

        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_query(self, query: str) -> SearchSnapshot:
        """Evaluate a new query value.

        The local phase completes before this returns. The remote phase is
        scheduled behind the debounce delay, replacing any pending one.
        """
        self._generation += 1
        generation = self._generation
        self._cancel_pending()

        if not query:
            self._publish(SearchSnapshot(generation=generation))
            return self._snapshot

        cached = self.local_index.search(query)
        search_source = SearchSource.CACHE if cached else self._snapshot.search_source
        self._publish(
            SearchSnapshot(
                query=query,
                generation=generation,
                cached_results=tuple(cached),
                search_source=search_source,
            )
        )

        async def run_remote() -> None:
            await self._run_remote(generation, query, tuple(cached))

        self._pending = self.scheduler.call_later(self.debounce_ms / 1000, run_remote)
        return self._snapshot

    async def settle(self) -> SearchSnapshot:
        """Wait for the pending debounce and any in-flight resolution."""
        await self.scheduler.drain()
        return self._snapshot

    def close(self) -> None:
        """Tear down: cancel the pending timer and ignore in-flight results."""
        self._generation += 1
        self._cancel_pending()
        self._listeners.clear()

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _publish(self, snapshot: SearchSnapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                logger.exception(
                    "hybrid_search_listener_failed",
                    generation=snapshot.generation,
                    error=str(e),
                )

    async def _run_remote(
        self,
        generation: int,
        query: str,
        cached: tuple[CompoundRecord, ...],
    ) -> None:
        if not self._is_current(generation):
            return

        self._pending = None
        self._publish(self._snapshot.model_copy(update={"loading": True}))
        logger.info("hybrid_search_remote_start", query=query[:100], generation=generation)

        remote: list[CompoundRecord] | None = None
        try:
            result = await self.resolve_query.execute(query, self.remote_limit)
            if isinstance(result, Failure):
                logger.warning(
                    "hybrid_search_remote_failed",
                    query=query[:100],
                    error=str(result.failure()),
                )
            else:
                remote = result.unwrap()
        except Exception as e:
            logger.exception("hybrid_search_remote_error", query=query[:100], error=str(e))

        if not self._is_current(generation):
            logger.debug(
                "hybrid_search_stale_result_discarded",
                query=query[:100],
                generation=generation,
                current_generation=self._generation,
            )
            return

        if remote is None:
            self._publish(self._snapshot.model_copy(update={"loading": False}))
            return

        seen = {record.identifier for record in cached}
        unique: list[CompoundRecord] = []
        for record in remote:
            if record.identifier not in seen:
                seen.add(record.identifier)
                unique.append(record)

        self._publish(
            self._snapshot.model_copy(
                update={
                    "api_results": tuple(unique),
                    "loading": False,
                    "search_source": SearchSource.BOTH if cached else SearchSource.API,
                }
            )
        )
        logger.info(
            "hybrid_search_remote_applied",
            query=query[:100],
            cached=len(cached),
            remote=len(remote),
            appended=len(unique),
        )
