"""Output sinks for the itemId action output."""

from __future__ import annotations

from pathlib import Path

import click

from boardplacer.logging import get_logger

logger = get_logger("action.outputs")


class GitHubOutputs:
    """Writes outputs to the $GITHUB_OUTPUT file, or stdout without one.

    Each write appends a `name=value` line; the runner keeps the last value
    written for a name.
    """

    def __init__(self, path: str | Path | None) -> None:
        self.path = Path(path) if path else None

    def set_output(self, name: str, value: str) -> None:
        logger.debug("Setting output %s=%s", name, value)
        if self.path is None:
            click.echo(f"{name}={value}")
            return
        with self.path.open("a", encoding="utf-8") as f:
            f.write(f"{name}={value}\n")


class MemoryOutputs:
    """Keeps outputs in memory. Records every write in order."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.history: list[tuple[str, str]] = []

    def set_output(self, name: str, value: str) -> None:
        self.values[name] = value
        self.history.append((name, value))
