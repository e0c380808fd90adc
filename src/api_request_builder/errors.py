from typing import Any


class RequestConfigurationError(Exception):
    """Base exception for test request setup errors."""
    pass


class InvalidBodyError(RequestConfigurationError):
    def __init__(self, body: Any, cause: Exception):
        msg = f"Invalid JSON body: {body!r}, error: {cause}"
        super().__init__(msg)
        self.body = body
        self.cause = cause


class InvalidQueryError(RequestConfigurationError):
    def __init__(self, query: str, reason: str):
        msg = f"Parse query failed for {query!r}: {reason}"
        super().__init__(msg)
        self.query = query
        self.reason = reason


class InvalidParamKeyError(RequestConfigurationError):
    def __init__(self, key: Any):
        msg = f"Param key should be a valid identifier: {key!r}"
        super().__init__(msg)
        self.key = key


class InvalidPlaceholderPatternError(RequestConfigurationError):
    def __init__(self, key: str, cause: Exception):
        msg = f"Compile placeholder pattern failed for key {key!r}: {cause}"
        super().__init__(msg)
        self.key = key
        self.cause = cause
