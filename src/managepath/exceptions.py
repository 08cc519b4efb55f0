"""Custom exceptions for ManagePath."""


class ManagePathError(Exception):
    """Base exception for managepath errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidConfigError(ManagePathError):
    """Raised when config file has invalid format or content."""

    def __init__(
        self,
        path: str,
        line_num: int | None = None,
        message: str = "Invalid config format",
    ):
        full_message = f"Invalid config in {path}"
        if line_num:
            full_message += f" at line {line_num}"
        full_message += f": {message}"
        super().__init__(full_message)
        self.path = path
        self.line_num = line_num


class ArgumentParseError(ManagePathError):
    """Raised when command-line argument parsing fails."""

    def __init__(self, message: str, argument: str | None = None):
        full_message = (
            f"Failed to parse argument '{argument}': {message}"
            if argument
            else f"Failed to parse arguments: {message}"
        )
        super().__init__(full_message)
        self.argument = argument


class InvalidTargetError(ArgumentParseError):
    """Raised when an unknown PATH target scope is requested."""

    def __init__(self, target: str):
        super().__init__(
            "expected one of process, user, machine, effective", argument=target
        )
        self.target = target


class EnvironmentVariableError(ManagePathError):
    """Raised when environment variable handling fails."""

    def __init__(self, var_name: str, message: str):
        super().__init__(f"Environment variable '{var_name}' error: {message}")
        self.var_name = var_name
