import logging
import threading
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 5.0

# scheduler(delay_seconds, callback) -> handle con cancel()
Scheduler = Callable[[float, Callable[[], None]], Any]


class RevealState(str, Enum):
    HIDDEN = "hidden"
    REVEALED = "revealed"


def thread_timer_scheduler(delay: float, callback: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class BudgetVisibilityController:
    """Máquina de dos estados (oculto / visible) para el presupuesto de un panel.

    Al mostrarse programa un auto-ocultado; nunca hay más de un temporizador
    pendiente porque el hueco ``_timer`` se reemplaza siempre cancelando el
    anterior.
    """

    def __init__(self, delay_seconds: float = DEFAULT_DELAY_SECONDS, scheduler: Optional[Scheduler] = None):
        self.delay_seconds = delay_seconds
        self._scheduler = scheduler or thread_timer_scheduler
        self._state = RevealState.HIDDEN
        self._timer = None
        self._closed = False
        self._lock = threading.Lock()

    @property
    def state(self) -> RevealState:
        return self._state

    @property
    def revealed(self) -> bool:
        return self._state is RevealState.REVEALED

    @property
    def timer_pending(self) -> bool:
        return self._timer is not None

    def toggle(self) -> RevealState:
        with self._lock:
            if self._closed:
                logger.warning("Toggle on a closed budget panel ignored")
                return self._state
            if self._state is RevealState.REVEALED:
                self._cancel_timer()
                self._state = RevealState.HIDDEN
            else:
                self._cancel_timer()
                self._state = RevealState.REVEALED
                self._schedule_hide()
            logger.debug("Budget visibility -> %s", self._state.value)
            return self._state

    def close(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._state = RevealState.HIDDEN
            self._closed = True

    def _schedule_hide(self) -> None:
        token = object()

        def fire():
            self._auto_hide(token)

        self._timer = (token, self._scheduler(self.delay_seconds, fire))

    def _cancel_timer(self) -> None:
        if self._timer is None:
            return
        _, handle = self._timer
        self._timer = None
        handle.cancel()

    def _auto_hide(self, token: object) -> None:
        with self._lock:
            # Un temporizador ya reemplazado no puede ocultar una nueva revelación.
            if self._timer is None or self._timer[0] is not token:
                return
            self._timer = None
            self._state = RevealState.HIDDEN
            logger.debug("Budget auto-hidden after %.1fs", self.delay_seconds)


def mask_budget(amount: float, revealed: bool, symbol: str = "", mask: str = "*****") -> str:
    if not revealed:
        return mask
    text = f"{amount:,.3f}".rstrip("0").rstrip(".")
    return f"{symbol}{text}"
