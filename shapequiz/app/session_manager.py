from __future__ import annotations

"""Session Manager: one play-through of the quiz.

Owns the session state, picks question types by difficulty band, draws
non-repeating questions, runs the per-question countdown and resolves each
question exactly once, by answer or by timeout.
"""

import functools
import random
import threading
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..catalog.attributes import AttributeCatalog
from ..config.config import GameConfig
from ..policy.difficulty import difficulty_band, select_question_type
from ..policy.feedback import FeedbackPolicy, RevealAndContinue, end_announcement, motivation_message
from ..policy.repetition import RecentCombinations
from ..questions.base_question import Question, QuestionType
from ..results.result_manager import ResultManager
from ..results.schema import TypeTally
from ..stats.scoring import accuracy_percent, score_answer
from ..util.randomness import make_rng
from . import events
from .countdown import Countdown, ManualCountdown
from .events import EventBus
from .explain import trace as xtrace
from .question_registry import make_all_generators


class SessionStateError(RuntimeError):
    """Session method called in a state that does not allow it."""


class Phase(str, Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass
class SessionState:
    question_index: int = 0
    total_questions: int = 20
    score: int = 0
    streak: int = 0
    correct_count: int = 0
    incorrect_count: int = 0
    answered: bool = False
    current_question: Optional[Question] = None
    remaining_seconds: int = 0


@dataclass(frozen=True)
class AnswerOutcome:
    question_index: int
    question_type: QuestionType
    answer: Optional[str]
    correct_answer: str
    correct: bool
    timed_out: bool
    points: int
    time_bonus: int
    streak_bonus: int
    streak: int
    score: int
    feedback: str
    hint: str
    reveal: bool = False


@dataclass(frozen=True)
class SessionSummary:
    score: int
    correct: int
    incorrect: int
    total: int
    accuracy: int
    message: str
    announcement: str
    per_type: Dict[str, TypeTally] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "correct": self.correct,
            "incorrect": self.incorrect,
            "total": self.total,
            "accuracy": self.accuracy,
            "message": self.message,
            "announcement": self.announcement,
            "per_type": dict(self.per_type),
        }


class QuizSession:
    """State machine Idle -> InProgress(1..N) -> Finished.

    All mutations go through start/advance/submit_answer/on_timeout/on_tick
    and are serialized by one re-entrant lock, so countdown ticks arriving
    from a timer thread cannot interleave with an answer.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        catalog: Optional[AttributeCatalog] = None,
        rng: Optional[random.Random] = None,
        countdown: Optional[Countdown] = None,
        bus: Optional[EventBus] = None,
        feedback: Optional[FeedbackPolicy] = None,
    ) -> None:
        self.cfg = config or GameConfig()
        n_options = self.cfg.generation.answer_options
        self.catalog = catalog or AttributeCatalog(min_options=n_options)
        self.rng = rng or make_rng()
        self.countdown: Countdown = countdown or ManualCountdown()
        self.bus = bus or EventBus()
        self.feedback: FeedbackPolicy = feedback or RevealAndContinue(self.rng)
        self.results = ResultManager()
        self._generators = make_all_generators(catalog=self.catalog, rng=self.rng, n_options=n_options)
        self._recent = RecentCombinations(self.cfg.generation.min_combinations_before_repeat)
        self._state = SessionState(total_questions=self.cfg.session.total_questions)
        self._phase = Phase.IDLE
        self._summary: Optional[SessionSummary] = None
        self._lock = threading.RLock()

    # Read-only views

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def state(self) -> SessionState:
        """Snapshot copy of the session state."""
        with self._lock:
            return replace(self._state)

    @property
    def current_question(self) -> Optional[Question]:
        return self._state.current_question

    @property
    def summary(self) -> Optional[SessionSummary]:
        return self._summary

    @property
    def progress(self) -> float:
        return self._state.question_index / self._state.total_questions

    @property
    def streak_active(self) -> bool:
        return self._state.streak >= self.cfg.session.streak_celebrate_at

    @property
    def timer_phase(self) -> str:
        remaining = self._state.remaining_seconds
        if remaining <= self.cfg.session.timer_critical_at_s:
            return "critical"
        if remaining <= self.cfg.session.timer_warning_at_s:
            return "warning"
        return "normal"

    # Transitions

    def start(self) -> Union[Question, SessionSummary]:
        """Reset every counter and move to question 1."""
        with self._lock:
            if self._phase is Phase.IN_PROGRESS:
                raise SessionStateError("session already in progress; use restart()")
            self.countdown.cancel()
            self._state = SessionState(total_questions=self.cfg.session.total_questions)
            self._recent.clear()
            self._summary = None
            session_id = self.results.start_session(self._state.total_questions)
            self._phase = Phase.IN_PROGRESS
            xtrace("session_started", {"session_id": session_id, "total": self._state.total_questions})
            self.bus.emit(events.SESSION_START, self._state.total_questions)
            return self.advance()

    def restart(self) -> Union[Question, SessionSummary]:
        with self._lock:
            self.countdown.cancel()
            self._phase = Phase.IDLE
            return self.start()

    def advance(self) -> Union[Question, SessionSummary]:
        """Present the next question, or finish after the last one."""
        with self._lock:
            if self._phase is not Phase.IN_PROGRESS:
                raise SessionStateError(f"cannot advance a session in phase '{self._phase.value}'")
            st = self._state
            if st.current_question is not None and not st.answered:
                raise SessionStateError(f"question {st.question_index} has not been resolved")
            if st.question_index >= st.total_questions:
                return self._finish()

            st.question_index += 1
            qtype = select_question_type(st.question_index, st.total_questions, self.rng, self.cfg.difficulty)
            question, repeated = self._recent.draw(
                self._generators[qtype].generate,
                self.cfg.generation.max_generation_attempts,
            )
            st.current_question = question
            st.answered = False
            st.remaining_seconds = self.cfg.session.timer_duration_s
            self.results.record_question(
                st.question_index, qtype.value, question.prompt, question.correct_answer, repeated=repeated
            )
            xtrace(
                "question_created",
                {
                    "index": st.question_index,
                    "band": int(difficulty_band(st.question_index, st.total_questions, self.cfg.difficulty)),
                    "type": qtype.value,
                    "truth": question.correct_answer,
                    "repeated": repeated,
                },
            )
            self.bus.emit(events.QUESTION, question)
            self.countdown.start(functools.partial(self._tick, st.question_index))
            return question

    def submit_answer(self, answer: str) -> Optional[AnswerOutcome]:
        """Resolve the current question with the player's answer.

        Returns None without touching any counter if the question was
        already resolved or no question is active.
        """
        with self._lock:
            q = self._state.current_question
            if self._phase is not Phase.IN_PROGRESS or q is None or self._state.answered:
                return None
            self._state.answered = True
            self.countdown.cancel()
            is_correct = self._generators[q.type].grade(answer, q.correct_answer)
            return self._resolve(answer, is_correct, timed_out=False)

    def on_timeout(self) -> Optional[AnswerOutcome]:
        """Resolve the current question as a miss because time ran out."""
        with self._lock:
            if self._phase is not Phase.IN_PROGRESS or self._state.current_question is None or self._state.answered:
                return None
            self._state.answered = True
            self.countdown.cancel()
            return self._resolve(None, False, timed_out=True)

    def on_tick(self) -> None:
        self._tick(self._state.question_index)

    # Internals

    def _tick(self, index: int) -> None:
        with self._lock:
            st = self._state
            if self._phase is not Phase.IN_PROGRESS or index != st.question_index or st.answered:
                return
            st.remaining_seconds = max(0, st.remaining_seconds - 1)
            self.bus.emit(events.TICK, st.remaining_seconds)
            if st.remaining_seconds == self.cfg.session.timer_critical_at_s:
                self.bus.emit(events.TIMER_WARNING, st.remaining_seconds)
            if st.remaining_seconds <= 0:
                self.on_timeout()

    def _resolve(self, answer: Optional[str], is_correct: bool, *, timed_out: bool) -> AnswerOutcome:
        st = self._state
        q = st.current_question
        assert q is not None
        result = score_answer(
            is_correct,
            st.remaining_seconds,
            self.cfg.session.timer_duration_s,
            st.streak,
            self.cfg.scoring,
        )
        st.score += result.points
        st.streak = result.streak
        if is_correct:
            st.correct_count += 1
        else:
            st.incorrect_count += 1

        decision = self.feedback.decide(is_correct, timed_out)
        self.results.record_answer(
            st.question_index,
            answer,
            is_correct,
            timed_out=timed_out,
            points=result.points,
            remaining_s=st.remaining_seconds,
        )
        outcome = AnswerOutcome(
            question_index=st.question_index,
            question_type=q.type,
            answer=answer,
            correct_answer=q.correct_answer,
            correct=is_correct,
            timed_out=timed_out,
            points=result.points,
            time_bonus=result.time_bonus,
            streak_bonus=result.streak_bonus,
            streak=st.streak,
            score=st.score,
            feedback=decision.feedback,
            hint=q.hint,
            reveal=decision.action == "reveal",
        )
        xtrace(
            "timeout" if timed_out else "graded",
            {
                "index": st.question_index,
                "answer": answer,
                "truth": q.correct_answer,
                "correct": is_correct,
                "points": result.points,
                "streak": st.streak,
            },
        )
        if timed_out:
            self.bus.emit(events.TIMEOUT, outcome)
        elif is_correct:
            self.bus.emit(events.CORRECT, outcome)
            if st.streak >= self.cfg.session.streak_celebrate_at:
                self.bus.emit(events.STREAK, st.streak)
        else:
            self.bus.emit(events.INCORRECT, outcome)
        return outcome

    def _finish(self) -> SessionSummary:
        st = self._state
        self.countdown.cancel()
        accuracy = accuracy_percent(st.correct_count, st.total_questions)
        self.results.end_session()
        self._summary = SessionSummary(
            score=st.score,
            correct=st.correct_count,
            incorrect=st.incorrect_count,
            total=st.total_questions,
            accuracy=accuracy,
            message=motivation_message(accuracy),
            announcement=end_announcement(st.score, accuracy),
            per_type=self.results.summarize(),
        )
        st.current_question = None
        self._phase = Phase.FINISHED
        xtrace("session_ended", {"score": st.score, "correct": st.correct_count, "accuracy": accuracy})
        self.bus.emit(events.SESSION_END, self._summary)
        return self._summary
