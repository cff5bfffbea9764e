"""Shared view-state machinery for screens."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

import structlog

from core.exceptions import AuthenticationError
from core.retry import ReadPolicy
from domain.entities.view_state import ViewState
from domain.viewmodels.ports import ISessionSignal

T = TypeVar("T")

logger = structlog.get_logger()


class ViewModel:
    """Base class for screens backed by the document store.

    Every focus issues one load. Loads are not cancelled when a newer one
    starts; instead each load carries a generation number and only the most
    recently issued load may write its result into the view.
    """

    screen_name = "screen"

    def __init__(
        self,
        session: ISessionSignal,
        read_policy: ReadPolicy | None = None,
    ) -> None:
        self._session = session
        self._read_policy = read_policy or ReadPolicy()
        self._load_generation = 0
        self.state = ViewState.IDLE
        self.error: str | None = None

    def _require_email(self) -> str:
        email = self._session.current_email()
        if not email:
            raise AuthenticationError("User not logged in")
        return email

    async def _load(
        self,
        fetch: Callable[[], Awaitable[T]],
        apply: Callable[[T], None],
    ) -> bool:
        """Run a read and apply its result. Returns True when applied.

        A failed read leaves the previously applied data in place and moves
        the view to LOAD_FAILED.
        """
        self._load_generation += 1
        generation = self._load_generation
        self.state = ViewState.LOADING

        try:
            result = await self._read_policy.run(f"{self.screen_name}_load", fetch)
        except Exception as exc:
            if generation != self._load_generation:
                return False
            logger.error(
                "screen_load_failed",
                screen=self.screen_name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            self.state = ViewState.LOAD_FAILED
            self.error = str(exc)
            return False

        if generation != self._load_generation:
            logger.debug("screen_load_superseded", screen=self.screen_name)
            return False

        apply(result)
        self.state = ViewState.LOADED
        self.error = None
        return True
