"""Line-based interactive prompts for menus and text input."""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TextIO


class PromptAborted(Exception):
    """Raised when the user ends input or interrupts a prompt."""


class Prompter:
    """Asks the user for choices and text through an input function and a stream."""

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else sys.stdout

    def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except (EOFError, KeyboardInterrupt) as exc:
            raise PromptAborted("prompt aborted") from exc

    def say(self, message: str) -> None:
        """Write one line of text to the output."""
        print(message, file=self._output)
        self._output.flush()

    def select(self, label: str, items: Sequence[str]) -> tuple[int, str]:
        """Let the user pick one of *items*; returns its index and text."""
        if not items:
            raise ValueError("nothing to select from")
        self.say(f"{label}:")
        for number, item in enumerate(items, start=1):
            self.say(f"  {number}) {item}")
        while True:
            answer = self._read("> ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(items):
                index = int(answer) - 1
                return index, items[index]
            if answer in items:
                index = list(items).index(answer)
                return index, items[index]
            self.say(f"Invalid choice, enter a number from 1 to {len(items)}.")

    def ask(
        self,
        label: str,
        validate: Callable[[str], None] | None = None,
    ) -> str:
        """Read a line of text; *validate* may raise ValueError to ask again."""
        while True:
            answer = self._read(f"{label}: ")
            if validate is None:
                return answer
            try:
                validate(answer)
            except ValueError as exc:
                self.say(f"✗ {exc}")
                continue
            return answer