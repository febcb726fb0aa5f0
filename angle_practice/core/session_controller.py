"""Owner of the live test state, shared between the UI panels.

The controller holds the single ``TestState``, runs every action through the
pure reducer and then applies the side effects the reducer must not perform
itself: writing or clearing the recovery snapshot, archiving frozen sessions
to history, and starting or stopping the countdown ticker.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
import logging
from threading import Lock
from types import TracebackType

from angle_practice.core.angle_generator import AngleGenerator
from angle_practice.core.models import PerformanceStats, Question, TestSession, TestState
from angle_practice.core.scoring import calculate_score, get_performance_stats
from angle_practice.core.services.countdown import Clock, NullTicker, SystemClock, Ticker
from angle_practice.core.services.session_storage import SessionStorage
from angle_practice.core.session_reducer import (
    ClearSelections,
    DeselectAngle,
    EndTest,
    LoadSession,
    NextQuestion,
    ResetTest,
    SelectAngle,
    StartTest,
    SubmitTest,
    UpdateTimer,
    initial_state,
    session_reducer,
)
from angle_practice.core.view_state import (
    ProgressView,
    SelectionView,
    TimerView,
    current_question,
    progress_view,
    selection_view,
    timer_view,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[TestState], None]


class TestContextError(RuntimeError):
    """Raised when view state is read outside an open controller scope."""

    __test__ = False


class TestController:
    """State-and-dispatch owner for one test attempt at a time."""

    __test__ = False

    def __init__(
        self,
        storage: SessionStorage | None = None,
        generator: AngleGenerator | None = None,
        ticker: Ticker | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._lock = Lock()
        self._state = initial_state()
        self._storage = storage
        self._generator = generator or AngleGenerator()
        self._ticker = ticker or NullTicker()
        self._clock = clock or SystemClock()
        self._listeners: list[StateListener] = []
        self._in_scope = False
        self._last_save_succeeded: bool | None = None

    # --- Scope ---

    def __enter__(self) -> TestController:
        self._in_scope = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._ticker.stop()
        self._in_scope = False

    def _require_scope(self) -> None:
        if not self._in_scope:
            raise TestContextError("Test view state must be read inside an open TestController scope.")

    # --- State & dispatch ---

    @property
    def state(self) -> TestState:
        return self._state

    @property
    def storage(self) -> SessionStorage | None:
        return self._storage

    @property
    def last_save_succeeded(self) -> bool | None:
        """Outcome of archiving the most recently frozen session, if any."""
        return self._last_save_succeeded

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: object) -> TestState:
        with self._lock:
            previous = self._state
            current = session_reducer(previous, action, now=self._clock.now)
            self._state = current

        if current is previous:
            return current

        self._apply_persistence(previous, current)
        self._sync_ticker()
        for listener in list(self._listeners):
            listener(current)
        return current

    # --- Actions ---

    def set_generator_seed(self, seed: int | None) -> None:
        self._generator.set_seed(seed)

    def start_new_test(self) -> TestSession:
        questions = self._generator.generate_test_questions()
        session = TestSession.create(questions, started_at=self._clock.now())
        logger.info("Starting test %s", session.id)
        self.dispatch(StartTest(session))
        return session

    def select_angle(self, angle_id: str) -> None:
        self.dispatch(SelectAngle(angle_id))

    def deselect_angle(self, angle_id: str) -> None:
        self.dispatch(DeselectAngle(angle_id))

    def clear_selections(self) -> None:
        self.dispatch(ClearSelections())

    def next_question(self) -> None:
        self.dispatch(NextQuestion())

    def submit_test(self) -> None:
        self.dispatch(SubmitTest())

    def end_test(self) -> None:
        self.dispatch(EndTest())

    def reset_test(self) -> None:
        self.dispatch(ResetTest())

    def load_session(self, session: TestSession) -> None:
        self.dispatch(LoadSession(session))

    def start_loaded_session(self) -> bool:
        """Re-activate a loaded, unfinished session from its first question."""
        session = self._state.current_session
        if session is None or session.is_completed or self._state.is_active:
            return False
        self.dispatch(StartTest(session))
        return True

    def recover_session(self) -> TestSession | None:
        if self._storage is None:
            return None
        session = self._storage.get_current_session()
        if session is None or session.is_completed:
            return None
        return session

    def resume_session(self, session: TestSession) -> bool:
        logger.info("Resuming test %s", session.id)
        self.load_session(session)
        return self.start_loaded_session()

    def discard_recovered_session(self) -> bool:
        if self._storage is None:
            return False
        return self._storage.clear_current_session()

    def get_history(self) -> list[TestSession]:
        if self._storage is None:
            return []
        return self._storage.get_test_history()

    def clear_history(self) -> bool:
        if self._storage is None:
            return False
        return self._storage.clear_all_test_history()

    # --- View state ---

    def current_question(self) -> Question | None:
        self._require_scope()
        return current_question(self._state)

    def progress(self) -> ProgressView:
        self._require_scope()
        return progress_view(self._state)

    def timer(self) -> TimerView:
        self._require_scope()
        return timer_view(self._state)

    def selections(self) -> SelectionView:
        self._require_scope()
        return selection_view(self._state)

    def results(self) -> PerformanceStats | None:
        self._require_scope()
        session = self._state.current_session
        if session is None or not session.is_completed:
            return None
        return get_performance_stats(session)

    # --- Side effects ---

    def _apply_persistence(self, previous: TestState, current: TestState) -> None:
        session = current.current_session
        if session is None or self._storage is None:
            return

        before = previous.current_session
        just_frozen = (
            session.is_completed
            and before is not None
            and before.id == session.id
            and not before.is_completed
        )
        if just_frozen:
            self._storage.clear_current_session()
            archived = replace(session, score=calculate_score(session))
            self._last_save_succeeded = self._storage.save_test_session(archived)
            if not self._last_save_succeeded:
                logger.warning("Test %s could not be saved to history", session.id)
        elif current.is_active and not session.is_completed:
            self._storage.save_current_session(session)

    def _sync_ticker(self) -> None:
        running = self._ticker.is_running()
        if self._state.is_active and not running:
            self._ticker.start(self._handle_tick)
        elif not self._state.is_active and running:
            self._ticker.stop()

    def _handle_tick(self) -> None:
        if not self._state.is_active:
            self._ticker.stop()
            return
        remaining = self._state.time_remaining - 1
        self.dispatch(UpdateTimer(remaining))
        if remaining <= 0 and self._state.is_active:
            logger.info("Time expired; submitting test")
            self.dispatch(SubmitTest())
