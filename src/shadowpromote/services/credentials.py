"""Admin password acquisition."""

import sys
from pathlib import Path
from typing import Optional

import click

from shadowpromote.errors import PromoteError


class CredentialSource:
    """Reads the admin password from a file, piped stdin or a hidden prompt."""

    PROMPT = "Admin password"

    def __init__(self, password_file: Optional[str] = None, stdin=None, prompt=click.prompt):
        self.password_file = password_file
        self.stdin = stdin
        self.prompt = prompt

    def get(self) -> str:
        if self.password_file:
            return self._read_password_file(self.password_file)

        stdin = self.stdin if self.stdin is not None else sys.stdin
        if not stdin.isatty():
            return stdin.readline().rstrip("\r\n")

        return self.prompt(self.PROMPT, hide_input=True, default="", show_default=False)

    @staticmethod
    def _read_password_file(password_file: str) -> str:
        path = Path(password_file)
        if not path.is_file():
            raise PromoteError(f"Password file not found: {password_file}")

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PromoteError(f"Could not read password file '{password_file}': {exc}") from exc

        lines = content.splitlines()
        return lines[0] if lines else ""
