from __future__ import annotations

import logging
from collections.abc import Sequence

from btmenu.config import PickerConfig
from btmenu.core import CommandError, CommandRunner

logger = logging.getLogger(__name__)


class Picker:
    """Shows a list of labels in an external dmenu-style picker."""

    def __init__(self, runner: CommandRunner, config: PickerConfig | None = None) -> None:
        self._runner = runner
        self._config = config or PickerConfig()

    def build_args(self, options: Sequence[str], prompt: str) -> list[str]:
        args = [*self._config.args, prompt]
        if self._config.lines_flag:
            lines = len(options) + self._config.extra_lines
            args += [self._config.lines_flag, str(lines)]
        return args

    def choose(self, options: Sequence[str], prompt: str) -> str:
        """Return the selected label, or "" when the picker is dismissed."""
        text = "".join(f"{option}\n" for option in options)
        try:
            output = self._runner.run(
                self._config.command,
                *self.build_args(options, prompt),
                input_text=text,
            )
        except CommandError as exc:
            if exc.returncode is None:
                logger.warning("Could not start picker: %s", exc)
            else:
                # dmenu-style pickers exit non-zero on escape
                logger.debug("Picker closed without selection: %s", exc)
            return ""
        return output.strip()
