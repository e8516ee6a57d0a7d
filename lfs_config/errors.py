class LfsConfigError(Exception):
    """Base exception for this package."""


class GitCommandError(LfsConfigError):
    """Raised when git cannot produce the configuration listing."""

    def __init__(self, args: list[str], stderr: str | None = None):
        self.git_args = args
        self.stderr = (stderr or "").strip()
        message = f"git {' '.join(args)} failed"
        super().__init__(f"{message}: {self.stderr}" if self.stderr else message)


class ExtensionPriorityError(LfsConfigError):
    """Raised when two extensions share the same priority."""

    def __init__(self, priority: int, names: list[str]):
        self.priority = priority
        self.names = names
        super().__init__(
            f"extensions {', '.join(names)} share priority {priority}"
        )
