# tests/test_session_loop.py

from __future__ import annotations

from collections.abc import Iterable

import pytest
import typer

from daytodo.application import DaySession, open_day
from daytodo.domain.shared import Ok
from daytodo.infrastructure.storage import DayFileRepository
from daytodo.interfaces.cli.commands.session import NOT_VALID, OUT_OF_RANGE, SessionLoop

from .helpers import DAY, TZ


class ScriptedInput:
    """
    Replays answers to prompts, then behaves like a closed stdin.
    """

    def __init__(self, answers: Iterable[str], confirmations: Iterable[bool] = ()) -> None:
        self._answers = iter(answers)
        self._confirmations = iter(confirmations)
        self.questions: list[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        try:
            return next(self._answers)
        except StopIteration:
            raise typer.Abort() from None

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        return next(self._confirmations)


@pytest.fixture()
def session(repository: DayFileRepository) -> DaySession:
    result = open_day(repository, DAY, TZ)
    assert isinstance(result, Ok)
    return result.value


def _run(session: DaySession, answers: list[str], confirmations: list[bool] | None = None) -> SessionLoop:
    script = ScriptedInput(answers, confirmations or [])
    loop = SessionLoop(session, ask=script.ask, confirm=script.confirm, clear_screen=False)
    loop.run()
    return loop


def test_new_and_mark(session: DaySession) -> None:
    _run(session, ["n", "buy milk", " X ", "1", "q"])

    assert [(r.text, r.done) for r in session.store] == [("buy milk", True)]


@pytest.mark.parametrize("token", ["1", "1.", "new", "TODO", " n "])
def test_new_aliases(session: DaySession, token: str) -> None:
    _run(session, [token, "task", "4"])

    assert len(session.store) == 1


def test_out_of_range_number_keeps_looping(session: DaySession, capsys: pytest.CaptureFixture[str]) -> None:
    _run(session, ["n", "only", "x", "5", "x", "one"])

    assert capsys.readouterr().out.count(OUT_OF_RANGE) == 2
    assert len(session.store) == 1


def test_unknown_command(session: DaySession, capsys: pytest.CaptureFixture[str]) -> None:
    _run(session, ["frobnicate"])

    assert NOT_VALID in capsys.readouterr().out


def test_delete_needs_confirmation(session: DaySession) -> None:
    _run(session, ["n", "keep me", "d", "1", "q"], confirmations=[False])
    assert len(session.store) == 1

    _run(session, ["delete", "1", "q"], confirmations=[True])
    assert len(session.store) == 0


def test_rejections_are_reported(session: DaySession, capsys: pytest.CaptureFixture[str]) -> None:
    _run(session, ["n", "+ 2 laundry", "x", "1"])

    assert "Cannot toggle" in capsys.readouterr().out
    assert session.store.records[0].done is False

    script = ScriptedInput(["3", "2"])
    SessionLoop(session, ask=script.ask, confirm=script.confirm, clear_screen=False).run()

    assert "Cannot delete" in capsys.readouterr().out
    assert not any(q.startswith("Delete") for q in script.questions)
    assert len(session.store) == 3


def test_invalid_group_marker_is_reported(session: DaySession, capsys: pytest.CaptureFixture[str]) -> None:
    _run(session, ["n", "+ lots"])

    assert "Invalid subtask group" in capsys.readouterr().out
    assert len(session.store) == 0


def test_end_of_input_ends_loop(session: DaySession, capsys: pytest.CaptureFixture[str]) -> None:
    _run(session, [])

    assert "no todo items" in capsys.readouterr().out
