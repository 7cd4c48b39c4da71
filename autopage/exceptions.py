"""
Errors raised by the pagination engine.
"""


class PaginationError(Exception):
    """Base exception for all pagination errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown pagination error occurred."


class GeometryError(PaginationError, ValueError):
    """Raised when page geometry cannot hold any layout."""

    @property
    def default_message(self) -> str:
        return "Invalid page geometry."


class OracleContractError(PaginationError, RuntimeError):
    """Raised when a layout oracle returns an unusable measurement."""

    @property
    def default_message(self) -> str:
        return "Layout oracle returned an invalid measurement."
