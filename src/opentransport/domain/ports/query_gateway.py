"""Query gateway port."""

from typing import Protocol, TypeVar

from pydantic import BaseModel

from opentransport.domain.models.request_context import RequestContext

ResultT = TypeVar("ResultT", bound=BaseModel)


class QueryGateway(Protocol):
    """Port for running a relative API path and decoding the reply."""

    async def fetch(
        self,
        path: str,
        result_type: type[ResultT],
        context: RequestContext | None = None,
    ) -> ResultT:
        """Send a GET for ``path`` and decode the body into ``result_type``."""
        ...
