"""Failures raised while assembling the application at startup."""


class WiringError(Exception):
    """The application cannot be assembled from its settings and providers."""


class ConfigurationError(WiringError):
    """A setting holds a value that is unsafe for the selected environment.

    Attributes:
        setting: Environment variable of the offending setting
    """

    def __init__(self, setting: str, reason: str) -> None:
        self.setting = setting
        super().__init__(f"{setting} {reason}")


class DependencyInjectionError(WiringError):
    """A DI component has no implementation for the requested mode."""
