"""Custom exceptions for the bridge ranker.

The ranking core never raises: these exceptions belong to the boundary
(loading payloads, config files and reference tables, graph lookups).
"""

from __future__ import annotations


class BridgeRankerError(Exception):
    """Base exception for all bridge ranker errors."""

    pass


class IncomingDataError(BridgeRankerError, ValueError):
    """Raised when inbound data fails validation."""


class ConfigFileNotFoundError(BridgeRankerError):
    """Raised when a config file path does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(BridgeRankerError):
    """Raised when a config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(f"Config file {path} could not be parsed: {detail}")


class ConfigFileValidationError(BridgeRankerError):
    """Raised when a config file has an unsupported shape or value."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(f"Config file {path} is invalid ({detail}).")


class ReferenceTablesFileNotFoundError(BridgeRankerError):
    """Raised when a reference tables file path does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Reference tables file not found: {path}")


class ReferenceTablesValidationError(BridgeRankerError):
    """Raised when a reference tables file fails validation."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(f"Reference tables file {path} is invalid ({detail}).")


class SourceProfileNotFoundError(BridgeRankerError):
    """Raised when the source profile cannot be located in the connection graph.

    Without the source node there are no outbound connections to rank.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Unable to locate source profile {name!r} in the connection graph. "
            "Check the profile identity (id or email) matches the graph."
        )
