# factchecker/errors.py
"""Failure kinds raised inside a fact check.

None of these reach the caller of FactChecker.check; they are turned into
an ERROR result at that boundary.
"""


class FactCheckError(Exception):
    pass


class ConfigurationError(FactCheckError):
    """The API key is not configured."""


class RemoteCallError(FactCheckError):
    """The Gemini call itself failed (network, auth, quota, ...)."""


class EmptyResponseError(FactCheckError):
    """The call succeeded but carried no text."""


class MalformedResponseError(FactCheckError):
    """The text was not JSON matching the verdict contract."""

    def __init__(self, message: str, payload: str = ""):
        super().__init__(message)
        self.payload = payload
