"""Exceptions raised by the Docker client."""

from __future__ import annotations

import http.client
import json
from os import PathLike
from pathlib import Path
from typing import Optional, Union

__all__ = [
    "DockerError",
    "NoHomePathError",
    "CertPathError",
    "CertMultipleKeys",
    "CertParseError",
    "NoNativeCertsError",
    "DockerResponseServerError",
    "JsonDataError",
    "APIVersionParseError",
    "RequestTimeoutError",
    "JsonSerdeError",
    "StrParseError",
    "DockerIOError",
    "StrFmtError",
    "HttpClientError",
    "HttpResponseError",
    "URLEncodedError",
    "wrap",
]

_PathArg = Union[str, "PathLike[str]"]


class DockerError(Exception):
    """Base class of every error raised by the client."""


class NoHomePathError(DockerError):
    """The home directory needed to locate certificates could not be found."""

    def __init__(self) -> None:
        super().__init__("Could not find home directory")


class CertPathError(DockerError):
    """A certificate file could not be opened or read."""

    def __init__(self, path: _PathArg) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot open/read certificate with path: {self.path}")


class CertMultipleKeys(DockerError):
    """A certificate file holds more than one key."""

    def __init__(self, count: int, path: _PathArg) -> None:
        self.count = count
        self.path = Path(path)
        super().__init__(
            f"Found multiple keys ({count}), expected one: {self.path}"
        )


class CertParseError(DockerError):
    """A key in a certificate file could not be parsed."""

    def __init__(self, path: _PathArg) -> None:
        self.path = Path(path)
        super().__init__(f"Could not parse key: {self.path}")


class NoNativeCertsError(DockerError):
    """The platform's root certificates could not be loaded."""

    def __init__(self, err: BaseException) -> None:
        self.err = err
        super().__init__("Could not load native certs")
        self.__cause__ = err


class DockerResponseServerError(DockerError):
    """The Docker server answered with an error status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(
            f"Docker responded with status code {status_code}: {message}"
        )


class JsonDataError(DockerError):
    """A JSON payload could not be deserialized.

    ``message`` is a short excerpt near the failure, ``column`` the offset of
    the failure and ``contents`` optionally the whole payload.
    """

    def __init__(
        self, message: str, column: int, contents: Optional[str] = None
    ) -> None:
        self.message = message
        self.column = column
        self.contents = contents
        super().__init__(f"Failed to deserialize JSON: {message}")


class APIVersionParseError(DockerError):
    """The API version reported by the server could not be parsed."""

    def __init__(self, api_version: str) -> None:
        self.api_version = api_version
        super().__init__(f"Failed to parse API version: {api_version}")


class RequestTimeoutError(DockerError):
    """A request did not complete in time."""

    def __init__(self) -> None:
        super().__init__("Timeout error")


class _WrappedError(DockerError):
    """An error that carries another one and reports its message unchanged."""

    def __init__(self, err: BaseException) -> None:
        self.err = err
        super().__init__(str(err))
        self.__cause__ = err


class JsonSerdeError(_WrappedError):
    """JSON encoding or decoding failed."""


class StrParseError(_WrappedError):
    """Bytes could not be decoded as text."""


class DockerIOError(_WrappedError):
    """An input/output operation failed."""


class StrFmtError(_WrappedError):
    """Formatting a string failed."""


class HttpClientError(_WrappedError):
    """An HTTP request could not be built or sent."""


class HttpResponseError(_WrappedError):
    """An HTTP response could not be received or read."""


class URLEncodedError(_WrappedError):
    """Query options could not be URL-encoded."""


def wrap(err: BaseException) -> DockerError:
    """Return the DockerError that stands for ``err``.

    DockerErrors are returned unchanged. Raises TypeError for exceptions
    that have no counterpart.
    """
    if isinstance(err, DockerError):
        return err
    if isinstance(err, json.JSONDecodeError):
        return JsonSerdeError(err)
    if isinstance(err, UnicodeError):
        return StrParseError(err)
    if isinstance(err, TimeoutError):
        return RequestTimeoutError()
    if isinstance(err, http.client.HTTPException):
        return HttpResponseError(err)
    if isinstance(err, OSError):
        return DockerIOError(err)
    raise TypeError(f"cannot wrap {type(err).__name__}: {err}")