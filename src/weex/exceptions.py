"""Custom exceptions for Weex."""


class WeexError(Exception):
    """Base exception for all Weex errors."""

    pass


class NotFoundError(WeexError, FileNotFoundError):
    """Raised when a required path does not exist."""

    pass


class PluginNotFoundError(NotFoundError):
    """Raised when a plugin directory is missing or is not a directory."""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"Plugin directory not found: {directory}")


class ParseError(WeexError, ValueError):
    """Raised when structured content cannot be parsed."""

    def __init__(self, message: str, file_path: str | None = None):
        self.file_path = file_path
        if file_path:
            message = f"{message}: {file_path}"
        super().__init__(message)


class FrontMatterError(ParseError):
    """Raised when a command or extension carries malformed front matter."""

    pass


class ConfigError(ParseError):
    """Raised when a plugin config file is malformed."""

    pass


class PatchSpecError(WeexError, ValueError):
    """Raised when a patch specification is ambiguous or incomplete."""

    pass


class ModuleLoadError(WeexError, ImportError):
    """Raised when a command or extension module cannot be resolved."""

    pass
