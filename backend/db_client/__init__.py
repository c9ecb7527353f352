"""Client helpers shared by the services that front the DB-Handler."""

from .client import DBHandlerClient, DBHandlerError, UpstreamResponse

__all__ = ["DBHandlerClient", "DBHandlerError", "UpstreamResponse"]
