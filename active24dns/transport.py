import logging
import requests
from active24dns.constants import HTTP_TIMEOUT


class HTTPTransport:
    """
    Sends a `requests.Request` and returns the `requests.Response`.
    Every call goes through its own `requests.request`, nothing is shared between calls.
    Anything with a compatible `send` method can replace it, tests use a fake one.
    """

    def __init__(self, timeout=HTTP_TIMEOUT):
        self.timeout = timeout

    def send(self, request):
        logging.debug(f"Sending {request.method} {request.url}...")
        r = requests.request(
            request.method,
            request.url,
            headers=request.headers,
            json=request.json,
            timeout=self.timeout,
        )
        logging.debug(f"Sending {request.method} {request.url}...done ({r.status_code}).")
        return r
