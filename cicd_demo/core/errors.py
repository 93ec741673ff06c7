class AppError(Exception):
    """Base class for failures that stop the server from starting."""

    code = "internal_error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ConfigurationError(AppError):
    """Environment holds a value the settings cannot accept."""

    code = "configuration_error"


class ServerStartupError(AppError):
    """The HTTP listener could not be started (e.g. port already bound)."""

    code = "server_startup_error"
