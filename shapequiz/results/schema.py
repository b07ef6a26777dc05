from __future__ import annotations

"""Result records kept in memory for one session."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class SessionRecord:
    session_id: str
    started_at: datetime
    total_questions: int
    ended_at: Optional[datetime] = None


@dataclass
class QuestionRecord:
    q_id: str
    session_id: str
    index: int
    question_type: str
    prompt: str
    correct_answer: str
    repeated: bool = False


@dataclass
class AnswerRecord:
    q_id: str
    answer_text: Optional[str]
    correct: bool
    timed_out: bool = False
    points: int = 0
    remaining_s: int = 0


@dataclass
class TypeTally:
    asked: int = 0
    correct: int = 0
    points: int = 0
    timeouts: int = 0
