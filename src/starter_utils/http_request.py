"""
One-shot HTTP GET with a completion callback.

The request runs off the calling thread and reports its outcome exactly once
as an ``(error, response, body)`` triple:

- success: ``(None, response, response.text)``
- transport failure: ``(exception, None, None)``

HTTP error statuses (4xx, 5xx) are successful transports, not errors.
There is no timeout and no retry.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

import requests


DEFAULT_URL = "http://www.google.com"

Outcome = Tuple[Optional[Exception], Optional[requests.Response], Optional[str]]
Callback = Callable[[Optional[Exception], Optional[requests.Response], Optional[str]], None]


def fetch(url: str = DEFAULT_URL) -> Outcome:
    """
    Perform a single GET request.

    Args:
        url: URL to request

    Returns:
        (error, response, body) triple; error is None on success
    """
    try:
        response = requests.get(url)
    except requests.RequestException as e:
        return e, None, None

    return None, response, response.text


def request(url: str, callback: Callback) -> "Future[Outcome]":
    """
    Issue a GET request in the background and call back once it settles.

    Args:
        url: URL to request
        callback: Called exactly once with (error, response, body)

    Returns:
        Future resolving to the (error, response, body) triple after the
        callback has returned. If the callback raises, the exception is
        set on the future.

    Example:
        >>> future = request(DEFAULT_URL, lambda e, r, b: print(status_code(r)))
        >>> future.result()
    """
    def run() -> Outcome:
        outcome = fetch(url)
        callback(*outcome)
        return outcome

    executor = ThreadPoolExecutor(max_workers=1)
    try:
        return executor.submit(run)
    finally:
        executor.shutdown(wait=False)


def status_code(response: Optional[requests.Response]) -> Optional[int]:
    """Status code of a response, or None if no response was received."""
    return response.status_code if response is not None else None


def format_outcome(
    error: Optional[Exception],
    response: Optional[requests.Response],
    body: Optional[str]
) -> List[str]:
    """
    Format a request outcome as console lines.

    Args:
        error: Transport error, if any
        response: Response, if one was received
        body: Response body text, if any

    Returns:
        Lines for the error, the status code and the body
    """
    return [
        f"error: {error!r}",
        f"statusCode: {status_code(response)}",
        f"body: {body}",
    ]
