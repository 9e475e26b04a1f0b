"""
Custom exceptions for cosmos-gini
"""


class CosmosGiniException(Exception):
    """Base exception for cosmos-gini library"""
    pass


class ValidationError(CosmosGiniException):
    """Input validation error"""
    pass


class ConfigurationError(ValidationError):
    """Invalid block height range, detected before any RPC call is made"""

    def __init__(self, validation):
        self.validation = validation
        super().__init__("; ".join(validation.errors))


class NetworkError(CosmosGiniException):
    """Network-related error"""

    def __init__(self, url: str, operation: str, message: str):
        self.url = url
        self.operation = operation
        super().__init__(f"Network error for {url} during {operation}: {message}")


class RpcError(NetworkError):
    """Validators query failed for a block height"""

    def __init__(self, url: str, height: int, message: str, status_code: int = None):
        self.height = height
        self.status_code = status_code
        super().__init__(url, f"validators query at height {height}", message)


class ResponseFormatError(RpcError):
    """Validators response did not have the expected JSON shape"""
    pass
