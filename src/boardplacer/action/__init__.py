"""Action package - GitHub Actions invocation boundary."""

from boardplacer.action.context import EventPayload, load_event
from boardplacer.action.inputs import ActionInputs, input_env_var
from boardplacer.action.outputs import GitHubOutputs, MemoryOutputs

__all__ = [
    "ActionInputs",
    "EventPayload",
    "GitHubOutputs",
    "MemoryOutputs",
    "input_env_var",
    "load_event",
]
