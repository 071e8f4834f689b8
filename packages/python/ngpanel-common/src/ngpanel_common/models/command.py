"""Outcome of an external command invocation."""

from __future__ import annotations

from pydantic import BaseModel


class CommandResult(BaseModel):
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    def render(self) -> str:
        return f"ExitCode: {self.exit_code}\nSTDOUT:\n{self.stdout}\nSTDERR:\n{self.stderr}"
