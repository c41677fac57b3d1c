from ratepoll.infra.http.transport import DEFAULT_TIMEOUT, RequestsTransport

__all__ = ["RequestsTransport", "DEFAULT_TIMEOUT"]
