from __future__ import annotations

"""CLI for shapequiz: inspect question types, play or simulate a session."""

import argparse
import random
import sys
from typing import Optional

import yaml

from .. import __version__
from ..catalog.attributes import AttributeCatalog
from ..config.config import GameConfig, load_config, validate_config
from ..policy.feedback import INTRO
from ..questions.base_question import Question
from ..stats.stats import format_summary
from ..util.randomness import make_rng
from . import events
from .countdown import ManualCountdown, ThreadedCountdown
from .events import EventBus
from .question_registry import get_question_type, list_question_types, make_generator
from .render import render_question, resolve_choice
from .session_manager import AnswerOutcome, QuizSession, SessionSummary


def _load(args: argparse.Namespace) -> GameConfig:
    if getattr(args, "explain", False):
        from .explain import enable as explain_enable
        explain_enable(True)
    return validate_config(load_config(args.config))


def _print_outcome(outcome: AnswerOutcome) -> None:
    print(outcome.feedback)
    if outcome.reveal:
        print(f"The answer was: {outcome.correct_answer}")
    print(f"Tip: {outcome.hint}")
    line = f"+{outcome.points} pts (score {outcome.score}, streak {outcome.streak})"
    if outcome.streak_bonus:
        line += f" incl. streak bonus {outcome.streak_bonus}"
    print(line + "\n")


def _print_summary(summary: SessionSummary) -> None:
    print("\nSession Summary:")
    print(format_summary(summary.as_dict()))
    print(summary.announcement)


def _cmd_play(cfg: GameConfig, seed: Optional[int]) -> int:
    bus = EventBus()
    session = QuizSession(cfg, rng=make_rng(seed), countdown=ThreadedCountdown(), bus=bus)

    def on_timeout(outcome: AnswerOutcome) -> None:
        print()
        _print_outcome(outcome)
        print("(press Enter to continue)")

    # Timer-thread notifications; the prompt line is still waiting for input
    bus.subscribe(events.TIMER_WARNING, lambda s: print(f"\n  {s} seconds left!"))
    bus.subscribe(events.TIMEOUT, on_timeout)
    bus.subscribe(events.STREAK, lambda n: print(f"Streak x{n}! Keep going!"))

    print(INTRO)
    item = session.start()
    while isinstance(item, Question):
        st = session.state
        print(render_question(item, session.catalog, st.question_index, st.total_questions))
        print(f"You have {cfg.session.timer_duration_s} seconds.")
        try:
            raw = input("Your answer: ")
        except EOFError:
            session.countdown.cancel()
            return 1
        outcome = session.submit_answer(resolve_choice(raw, item.options))
        if outcome is not None:
            _print_outcome(outcome)
        item = session.advance()
    _print_summary(item)
    return 0


def _cmd_simulate(cfg: GameConfig, seed: Optional[int], accuracy: float, quiet: bool) -> int:
    """Auto-play one session against a manual countdown."""
    countdown = ManualCountdown()
    session = QuizSession(cfg, rng=make_rng(seed), countdown=countdown)
    player = random.Random(None if seed is None else seed + 1)
    duration = cfg.session.timer_duration_s

    item = session.start()
    while isinstance(item, Question):
        # Ticks the player spends thinking; a full countdown means a timeout
        countdown.tick(player.randint(0, duration))
        if session.state.answered:
            if not quiet:
                print(f"Q{session.state.question_index}: {item.prompt} -> timed out")
        else:
            if player.random() < accuracy:
                answer = item.correct_answer
            else:
                answer = player.choice([o for o in item.options if o != item.correct_answer])
            result = session.submit_answer(answer)
            if not quiet and result is not None:
                mark = "ok" if result.correct else f"wrong (was {result.correct_answer})"
                print(f"Q{result.question_index}: {item.prompt} -> {answer} {mark} +{result.points}")
        item = session.advance()
    _print_summary(item)
    return 0


def _cmd_sample(cfg: GameConfig, type_id: str, count: int, seed: Optional[int]) -> int:
    meta = get_question_type(type_id)
    n_options = cfg.generation.answer_options
    catalog = AttributeCatalog(min_options=n_options)
    gen = make_generator(meta.id, catalog=catalog, rng=make_rng(seed), n_options=n_options)
    for i in range(1, count + 1):
        q = gen.generate()
        print(render_question(q, catalog, i, count))
        print(f"Answer: {q.correct_answer} | Tip: {q.hint}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="shapequiz")
    p.add_argument("--version", action="version", version=f"shapequiz {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    def common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--config", default=None, help="Path to YAML config")
        sp.add_argument("--seed", type=int, default=None, help="RNG seed (defaults to SEED env var)")
        sp.add_argument("--explain", action="store_true")

    sub.add_parser("list-types")

    sc = sub.add_parser("show-config")
    sc.add_argument("--config", default=None)

    sp = sub.add_parser("sample")
    common(sp)
    sp.add_argument("--type", dest="type_id", required=True)
    sp.add_argument("--count", type=int, default=3)

    pp = sub.add_parser("play")
    common(pp)

    sm = sub.add_parser("simulate")
    common(sm)
    sm.add_argument("--accuracy", type=float, default=0.8, help="Chance of a correct answer, 0..1")
    sm.add_argument("--quiet", action="store_true")

    args = p.parse_args(argv)

    if args.cmd == "list-types":
        for m in list_question_types():
            print(f"{m.id}: {m.name} - {m.description} | skills: {', '.join(m.skills)}")
        return 0

    if args.cmd == "show-config":
        cfg = validate_config(load_config(args.config))
        print(yaml.safe_dump(cfg.model_dump(), sort_keys=False), end="")
        return 0

    cfg = _load(args)
    if args.cmd == "sample":
        try:
            return _cmd_sample(cfg, args.type_id, args.count, args.seed)
        except KeyError as e:
            print(f"ERROR: {e.args[0]}", file=sys.stderr)
            return 2
    if args.cmd == "play":
        return _cmd_play(cfg, args.seed)
    if args.cmd == "simulate":
        return _cmd_simulate(cfg, args.seed, args.accuracy, args.quiet)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
