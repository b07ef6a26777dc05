from __future__ import annotations

"""Results Manager: in-memory log of questions and answers for a session.

Nothing is written to disk; the log is discarded on restart.
"""

from datetime import datetime, timezone
from typing import Dict, Optional
from uuid import uuid4

from .schema import AnswerRecord, QuestionRecord, SessionRecord, TypeTally


class ResultManager:
    def __init__(self) -> None:
        self.session: Optional[SessionRecord] = None
        self._questions: Dict[str, QuestionRecord] = {}
        self._answers: Dict[str, AnswerRecord] = {}

    def start_session(self, total_questions: int) -> str:
        self._questions.clear()
        self._answers.clear()
        session_id = str(uuid4())
        self.session = SessionRecord(
            session_id=session_id,
            started_at=datetime.now(timezone.utc),
            total_questions=total_questions,
        )
        return session_id

    def _q_id(self, index: int) -> str:
        assert self.session is not None
        return f"{self.session.session_id}:{index}"

    def record_question(self, index: int, question_type: str, prompt: str, correct_answer: str, repeated: bool = False) -> str:
        assert self.session is not None
        q_id = self._q_id(index)
        self._questions[q_id] = QuestionRecord(
            q_id=q_id,
            session_id=self.session.session_id,
            index=index,
            question_type=question_type,
            prompt=prompt,
            correct_answer=correct_answer,
            repeated=repeated,
        )
        return q_id

    def record_answer(
        self,
        index: int,
        answer: Optional[str],
        correct: bool,
        *,
        timed_out: bool = False,
        points: int = 0,
        remaining_s: int = 0,
    ) -> None:
        q_id = self._q_id(index)
        if q_id not in self._questions:
            raise KeyError(f"No question recorded at index {index}")
        self._answers[q_id] = AnswerRecord(
            q_id=q_id,
            answer_text=answer,
            correct=correct,
            timed_out=timed_out,
            points=points,
            remaining_s=remaining_s,
        )

    def end_session(self) -> None:
        if self.session is not None:
            self.session.ended_at = datetime.now(timezone.utc)

    def summarize(self) -> Dict[str, TypeTally]:
        """Per question type: asked, correct and points earned."""
        per_type: Dict[str, TypeTally] = {}
        for q_id, ans in self._answers.items():
            q = self._questions[q_id]
            tally = per_type.setdefault(q.question_type, TypeTally())
            tally.asked += 1
            tally.correct += 1 if ans.correct else 0
            tally.points += ans.points
            tally.timeouts += 1 if ans.timed_out else 0
        return per_type
