"""Interactive day session.

The classic menu loop: show the day's list, ask for a command, apply it,
repeat. Everything happens in memory; the day file is written once when
the loop ends (quit, end of input or Ctrl-C).
"""

import logging
from collections.abc import Callable

import typer

from daytodo.application import DaySession, add_task, delete_task, toggle_task
from daytodo.domain.shared import Err
from daytodo.interfaces.cli.common import (
    DayOption,
    DirOption,
    finish_session,
    format_event,
    format_progress,
    open_session,
    print_store,
)

logger = logging.getLogger(__name__)

OPTIONS = """
1. [n]ew todo
2. [x] mark done/undone
3. [d]elete
4. [q]uit"""

NEW_TOKENS = frozenset({"1", "1.", "new", "todo", "n"})
MARK_TOKENS = frozenset({"2", "2.", "mark", "done", "undone", "x"})
DELETE_TOKENS = frozenset({"3", "3.", "delete", "d"})
QUIT_TOKENS = frozenset({"4", "4.", "quit", "q"})

OUT_OF_RANGE = "Argument out of range."
NOT_VALID = "Not a valid argument!"


def normalize(answer: str) -> str:
    return answer.lower().strip()


def _prompt(question: str) -> str:
    return typer.prompt(question, default="", show_default=False, prompt_suffix="")


def _confirm(question: str) -> bool:
    return typer.confirm(question, default=False)


class SessionLoop:
    """Menu-driven editing loop over an open day.

    Args:
        session: The open day.
        ask: Reads one line of user input after showing a question.
        confirm: Yes/no question, defaulting to no.
        clear_screen: Clear the terminal before each redraw.
    """

    def __init__(
        self,
        session: DaySession,
        ask: Callable[[str], str] = _prompt,
        confirm: Callable[[str], bool] = _confirm,
        clear_screen: bool = True,
    ) -> None:
        self.session = session
        self._ask = ask
        self._confirm = confirm
        self.clear_screen = clear_screen
        self.notice: str | None = None

    def run(self) -> None:
        """Loop until the user quits; input errors never end the loop."""
        try:
            while True:
                self._redraw()
                answer = normalize(self._ask(f"{OPTIONS}\n: "))
                if answer in QUIT_TOKENS:
                    break
                self.handle(answer)
        except typer.Abort:
            # End of input or Ctrl-C still saves the day
            typer.echo("")
            logger.debug("Session aborted from the terminal")

    def handle(self, answer: str) -> None:
        if answer in NEW_TOKENS:
            self._new()
        elif answer in MARK_TOKENS:
            self._mark()
        elif answer in DELETE_TOKENS:
            self._delete()
        else:
            self.notice = NOT_VALID

    # -------------------- commands --------------------
    def _new(self) -> None:
        text = self._ask("Task for the new todo: ").strip()
        if not text:
            self.notice = "Task text required."
            return
        result = add_task(self.session, text)
        if isinstance(result, Err):
            self.notice = result.error.message
            return
        self.notice = format_event(result.value)

    def _mark(self) -> None:
        index = self._ask_number("check/uncheck")
        if index is None:
            return
        result = toggle_task(self.session, index)
        if isinstance(result, Err):
            self.notice = result.error.message
            return
        self.notice = format_event(result.value)

    def _delete(self) -> None:
        index = self._ask_number("delete")
        if index is None:
            return
        found = self.session.store.deletable_at(index)
        if isinstance(found, Err):
            self.notice = found.error.message
            return
        if not self._confirm(f"Delete '{found.value.text}' ?"):
            self.notice = "Nothing deleted."
            return
        result = delete_task(self.session, index)
        if isinstance(result, Err):
            self.notice = result.error.message
            return
        self.notice = format_event(result.value)

    def _ask_number(self, reason: str) -> int | None:
        raw = self._ask(f"Number of the todo to {reason}: ").strip().rstrip(".")
        if not raw.isdigit():
            self.notice = OUT_OF_RANGE
            return None
        index = int(raw)
        if not 1 <= index <= len(self.session.store):
            self.notice = OUT_OF_RANGE
            return None
        return index

    # -------------------- display --------------------
    def _redraw(self) -> None:
        if self.clear_screen:
            typer.clear()
        typer.echo(format_progress(self.session))
        print_store(self.session.store)
        if self.notice:
            typer.echo(f"\n{self.notice}")
            self.notice = None


def run_session(
    day: str | None = None,
    data_dir: str | None = None,
    clear_screen: bool = True,
) -> None:
    """Open a day, run the loop, save. A failed save exits with code 1."""
    session = open_session(day, data_dir)
    SessionLoop(session, clear_screen=clear_screen).run()
    finish_session(session)
    typer.echo("Exiting...")


def session(
    day: DayOption = None,
    data_dir: DirOption = None,
    no_clear: bool = typer.Option(False, "--no-clear", help="Do not clear the screen between commands"),
) -> None:
    """Edit a day interactively (the default when no command is given).

    Example:
        daytodo session --day 2026-10-18
    """
    run_session(day=day, data_dir=data_dir, clear_screen=not no_clear)
