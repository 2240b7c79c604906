"""Custom exceptions for the wallet toolkit."""


class WalletError(Exception):
    """Base exception for wallet errors."""


class InvalidInputError(WalletError):
    """Raised when a record or table field is malformed."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid input on '{field}': {message}")


class BalanceImportError(WalletError):
    """Raised when a balance file cannot be imported."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Import error from {source}: {message}")


class PriceFetchError(WalletError):
    """Raised when the price source cannot be read after all retries."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Price fetch failed for {url}: {message}")


class UnknownTokenError(WalletError):
    """Raised when a swap references a token outside the catalog."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown token: {symbol}")
