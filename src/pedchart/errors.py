"""Exceptions raised by the layout engine."""


class PedigreeError(Exception):
    """Base class for failures that prevent a layout pass from completing."""


class ConfigError(PedigreeError, ValueError):
    pass


class CycleError(PedigreeError, ValueError):
    """Raised when the parent/child graph contains a cycle."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Cycle detected in parent-child relationships: {cycle}")
