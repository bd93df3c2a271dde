# dockwire

Exception classes for a Docker Engine API client, in the module
`dockwire.errors`.

Every class derives from `dockwire.errors.DockerError`, so one `except`
clause catches them all. The more specific classes carry the details as
attributes, and their message is built from those details.

## Installation

```
pip install dockwire
```

## Error classes

| Class | Attributes | Message |
| --- | --- | --- |
| `NoHomePathError` | | `Could not find home directory` |
| `CertPathError` | `path` | `Cannot open/read certificate with path: <path>` |
| `CertMultipleKeys` | `count`, `path` | `Found multiple keys (<count>), expected one: <path>` |
| `CertParseError` | `path` | `Could not parse key: <path>` |
| `NoNativeCertsError` | `err` | `Could not load native certs` |
| `DockerResponseServerError` | `status_code`, `message` | `Docker responded with status code <status_code>: <message>` |
| `JsonDataError` | `message`, `column`, `contents` | `Failed to deserialize JSON: <message>` |
| `APIVersionParseError` | `api_version` | `Failed to parse API version: <api_version>` |
| `RequestTimeoutError` | | `Timeout error` |

`path` attributes are always `pathlib.Path` objects, whether a string or a
path was given. `JsonDataError.contents` is optional and defaults to `None`.

The following classes each wrap another exception, given as their only
argument. They keep it as `err`, set it as `__cause__`, and use its message
unchanged:

| Class | Stands for |
| --- | --- |
| `JsonSerdeError` | JSON encoding or decoding failed |
| `StrParseError` | bytes could not be decoded as text |
| `DockerIOError` | an input/output operation failed |
| `StrFmtError` | formatting a string failed |
| `HttpClientError` | an HTTP request could not be built or sent |
| `HttpResponseError` | an HTTP response could not be received or read |
| `URLEncodedError` | query options could not be URL-encoded |

`NoNativeCertsError` also sets the exception it is given as `__cause__`.

## Converting other exceptions

`wrap(err)` returns the `DockerError` that stands for a lower-level
exception:

| Given | Returned |
| --- | --- |
| a `DockerError` | the same object |
| `json.JSONDecodeError` | `JsonSerdeError` |
| `UnicodeError` (and its subclasses) | `StrParseError` |
| `TimeoutError` | `RequestTimeoutError` |
| `http.client.HTTPException` | `HttpResponseError` |
| any other `OSError` | `DockerIOError` |

Any other exception raises `TypeError`.

## Usage

```python
from dockwire.errors import DockerError, DockerResponseServerError, wrap

try:
    raise DockerResponseServerError(status_code=404, message="No such container")
except DockerError as exc:
    print(exc)  # Docker responded with status code 404: No such container

try:
    b"\xff".decode("utf-8")
except UnicodeDecodeError as exc:
    err = wrap(exc)  # a StrParseError; err.err is the original exception
```

## What this package does not do

It holds only the error types. It does not connect to a Docker daemon,
send requests or parse responses; a client that does so is expected to
raise these exceptions.

## Running the tests

```
pip install -e .[test]
pytest
```