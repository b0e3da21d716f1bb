"""Thin wrapper around external commands.

Every piece of adapter and device state comes from running a command and
reading its stdout, so this is the single place where processes are started.
Tests swap in a fake with the same two methods.
"""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """An external command could not be started or exited non-zero."""

    def __init__(
        self,
        command: str,
        args: tuple[str, ...],
        cause: BaseException | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = command
        self.arguments = args
        self.cause = cause
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(self._describe())

    def _describe(self) -> str:
        cmdline = " ".join((self.command, *self.arguments))
        if self.returncode is not None:
            detail = f"exit code {self.returncode}"
            if self.stderr:
                detail += f": {self.stderr}"
        else:
            detail = str(self.cause) if self.cause else "unknown error"
        return f"Command '{cmdline}' failed ({detail})"


class CommandRunner:
    def run(self, command: str, *args: str, input_text: str | None = None) -> str:
        """Run a command to completion and return its stdout.

        Output is decoded as UTF-8; undecodable bytes are replaced.
        """
        logger.debug("Running %s %s", command, " ".join(args))
        try:
            result = subprocess.run(
                [command, *args],
                input=input_text,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise CommandError(command, args, cause=exc) from exc

        if result.returncode != 0:
            raise CommandError(
                command,
                args,
                returncode=result.returncode,
                stderr=result.stderr.strip(),
            )
        return result.stdout

    def spawn(self, command: str, *args: str) -> subprocess.Popen[bytes]:
        """Start a command in the background without waiting for it."""
        logger.debug("Spawning %s %s", command, " ".join(args))
        try:
            return subprocess.Popen(
                [command, *args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise CommandError(command, args, cause=exc) from exc
