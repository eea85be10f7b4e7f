"""Session-tagged console I/O: messages, prompts, and the retry-or-exit routine."""

import getpass
import sys
import uuid
from dataclasses import dataclass, field
from typing import Callable, TextIO

import click

PROMPT_MARKER = "> "
EXIT_WORD = "exit"
_AFFIRMATIVE = ("yes", "y")


def _read_secret(prompt_text):
    # Ctrl-C must surface as KeyboardInterrupt, never click.Abort.
    return getpass.getpass(prompt_text)


@dataclass
class ConsoleConfig:
    """I/O configuration for prompts and messages."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    secret_fn: Callable[[str], str] = field(default_factory=lambda: _read_secret)
    output: TextIO = field(default_factory=lambda: sys.stdout)


def new_session_id() -> str:
    """Short random id used to tag every message of one provisioning run."""
    return uuid.uuid4().hex[:8]


def is_affirmative(answer) -> bool:
    """Blank, 'yes' and 'y' (any case) count as yes."""
    if answer is None:
        return True
    answer = answer.strip()
    return answer == "" or answer.lower() in _AFFIRMATIVE


class SessionConsole:
    """Console bound to one session id.

    All messages are prefixed with ``[<session_id>]`` so output from
    separate provisioning runs can be told apart.
    """

    def __init__(self, session_id: str, config: ConsoleConfig = None):
        self._session_id = session_id
        self._config = config or ConsoleConfig()

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def config(self) -> ConsoleConfig:
        return self._config

    def echo(self, message=""):
        click.echo(message, file=self._config.output)

    def info(self, message, fg=None):
        text = f"[{self._session_id}] {message}"
        if fg:
            text = click.style(text, fg=fg)
        click.echo(text, file=self._config.output)

    def error(self, message):
        text = click.style(f"[{self._session_id}] ERROR: {message}", fg="red")
        click.echo(text, file=self._config.output)

    def ask(self, prompt) -> str:
        self.info(prompt)
        return self._read(self._config.input_fn).strip()

    def ask_secret(self, prompt) -> str:
        self.info(prompt)
        return self._read(self._config.secret_fn).strip()

    def ask_yes_no(self, prompt, fg=None) -> bool:
        self.info(prompt, fg=fg)
        return is_affirmative(self._read(self._config.input_fn))

    def retry_or_exit(self, prompt, exit_code):
        """Ask whether to retry or exit.

        Returns normally when the user wants to retry.

        Raises:
            SystemExit(exit_code): When the user types 'exit'.
        """
        answer = self.ask(prompt)
        if answer.lower() == EXIT_WORD:
            self.info("Exiting the application.")
            sys.exit(exit_code)

    def _read(self, reader):
        try:
            return reader(PROMPT_MARKER)
        except EOFError:
            self.echo()
            self.echo("Input closed. Exiting.")
            sys.exit(0)
