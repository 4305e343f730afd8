"""Exception types raised by homerowmods."""


class HomeRowModsError(Exception):
    """Base class for all homerowmods errors."""


class InvalidSymbolsError(HomeRowModsError, ValueError):
    """Raised when the symbol list handed to the generator breaks its contract."""


class UnknownVariantError(HomeRowModsError):
    """Raised when a layout variant name is not registered."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Unknown variant '{name}' (available: {', '.join(available)})")


class ProfileNotFoundError(HomeRowModsError):
    """Raised when karabiner.json has no profile with the requested name."""

    def __init__(self, profile_name: str, path: str):
        self.profile_name = profile_name
        self.path = path
        super().__init__(f"Profile '{profile_name}' not found in {path}")


class ConfigurationError(HomeRowModsError):
    """Raised when a configuration file cannot be read or parsed."""
