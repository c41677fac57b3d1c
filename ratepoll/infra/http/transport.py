from typing import Any, Optional

import requests

from ratepoll.core.exceptions import (
    HttpStatusError,
    TransportError,
    TransportTimeoutError,
)
from ratepoll.core.ports.transport import Transport
from ratepoll.core.schema.response import HttpResponse

DEFAULT_TIMEOUT = 30.0


class RequestsTransport(Transport):
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout

    def send(self, target: str) -> HttpResponse:
        try:
            response = self._session.get(target, timeout=self._timeout)
            response.raise_for_status()
        except requests.Timeout as error:
            raise TransportTimeoutError(
                f"Request to {target} timed out", target
            ) from error
        except requests.HTTPError as error:
            failed = error.response
            status_code = failed.status_code if failed is not None else 0
            raise HttpStatusError(
                f"Request to {target} returned HTTP {status_code}",
                status_code,
                target,
            ) from error
        except requests.RequestException as error:
            raise TransportError(
                f"Request to {target} failed: {error}", target
            ) from error

        return HttpResponse(
            status_code=response.status_code,
            payload=self._decode(response),
            url=response.url or target,
        )

    def _decode(self, response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> 'RequestsTransport':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
