"""Exception classes for quant-monitor."""


class QuantMonitorError(Exception):
    """Base exception for quant-monitor."""


# Provider-related exceptions


class DataFetchError(QuantMonitorError):
    """Exception raised when price history for a symbol cannot be fetched."""

    def __init__(self, message: str, symbol: str | None = None) -> None:
        """Initialize DataFetchError.

        Args:
            message: Error message
            symbol: Symbol whose history could not be fetched
        """
        self.symbol = symbol
        super().__init__(message)


# Loop-level (fatal) exceptions


class SymbolSourceError(QuantMonitorError):
    """Exception raised when the symbol list cannot be read."""


class PersistenceError(QuantMonitorError):
    """Exception raised when a report cannot be appended to the CSV file."""


class ConfigError(QuantMonitorError):
    """Exception raised when the monitor configuration is invalid."""
