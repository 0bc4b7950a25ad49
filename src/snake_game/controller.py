"""Game lifecycle: the recurring tick task and snapshot listeners."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from snake_game.config import GameConfig
from snake_game.controls import Command, InputMapper
from snake_game.engine import GameEngine

logger = logging.getLogger(__name__)

Listener = Callable[[dict], Awaitable[None]]


class GameController:
    """Owns one engine, its tick timer, and the listeners fed each tick.

    The timer is an asyncio task armed by :meth:`start` and cancelled by
    :meth:`stop`; use ``async with`` to tie both to a scope. Every tick
    reads ``self.engine`` afresh, so input applied between ticks is always
    seen by the next one.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        engine: GameEngine | None = None,
    ) -> None:
        if engine is None:
            engine = GameEngine(config)
        self.engine = engine
        self.config = engine.config
        self.input = InputMapper(engine)
        self._listeners: list[Listener] = []
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    # --- input ---

    def handle_key(self, key: str) -> Command | None:
        """Apply a raw key press; non-arrow keys are ignored."""
        return self.input.press(key)

    def apply(self, command: Command) -> None:
        self.input.apply(command)

    def reset(self) -> dict:
        """Restore the initial state. Allowed at any time."""
        logger.info(
            "Resetting game (score was %d, game_over=%s).",
            self.engine.score, self.engine.game_over,
        )
        return self.engine.reset()

    def snapshot(self) -> dict:
        return self.engine.get_state()

    # --- listeners ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for per-tick snapshots.

        Returns a callable that unsubscribes it.
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def publish(self, state: dict | None = None) -> None:
        """Send a snapshot to every listener, dropping those that fail."""
        if state is None:
            state = self.snapshot()
        dead: list[Listener] = []
        # Listeners may unsubscribe while we await them.
        for listener in list(self._listeners):
            try:
                await listener(state)
            except Exception:
                logger.warning(
                    "Dropping snapshot listener %r.", listener, exc_info=True,
                )
                dead.append(listener)
        for listener in dead:
            self.unsubscribe(listener)

    # --- timer ---

    def start(self) -> None:
        """Arm the tick timer. Does nothing if it is already running."""
        if self.running:
            return
        self._task = asyncio.create_task(self._tick_loop())
        logger.info(
            "Tick loop started (interval=%d ms).", self.config.tick_interval_ms,
        )

    async def stop(self) -> None:
        """Cancel the tick timer and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        if not task.done():
            task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        logger.info("Tick loop stopped.")

    async def __aenter__(self) -> GameController:
        self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()

    async def _tick_loop(self) -> None:
        """Tick the engine on a fixed period and publish each snapshot."""
        interval = self.config.tick_interval
        try:
            while True:
                await asyncio.sleep(interval)
                state = self.engine.tick()
                await self.publish(state)
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
            raise
        except Exception:
            logger.exception("Tick loop error.")
