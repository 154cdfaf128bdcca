"""Building and validating outbound API requests."""

from dataclasses import dataclass, field

from yarl import URL

from opentransport.domain.errors import ConstructionError, RequestValidationError
from opentransport.domain.models.request_context import RequestContext

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


@dataclass(frozen=True)
class ApiRequest:
    """A single outbound HTTP request bound to a call context."""

    method: str
    url: URL
    headers: dict[str, str] = field(default_factory=dict)
    context: RequestContext = field(default_factory=RequestContext.background)
    body: bytes | None = None


def build_request(
    base_url: str,
    path: str,
    user_agent: str,
    context: RequestContext | None = None,
) -> ApiRequest:
    """Create a GET request for ``path`` relative to ``base_url``.

    The path is appended verbatim. Query builders hand over already escaped
    strings (``via[]=Z%C3%BCrich``) which must reach the server unchanged.

    Args:
        base_url: API base URL ending with a slash.
        path: Relative path with query string, e.g. ``locations?query=Bern``.
        user_agent: Value of the User-Agent header.
        context: Call context, a background context is used when omitted.

    Returns:
        GET request without body.

    Raises:
        ConstructionError: If the resulting URL cannot be parsed.
    """
    try:
        url = URL(f"{base_url}{path}", encoded=True)
    except (TypeError, ValueError) as e:
        raise ConstructionError(f"failed to create new request: {e}") from e

    return ApiRequest(
        method="GET",
        url=url,
        headers={**DEFAULT_HEADERS, "User-Agent": user_agent},
        context=context if context is not None else RequestContext.background(),
    )


def validate_request(request: ApiRequest) -> None:
    """Check a request against the minimum requirements for sending.

    Raises:
        RequestValidationError: Naming the first rule the request violates.
    """
    if request.method != "GET":
        raise RequestValidationError(
            f"the request has an invalid http method {request.method} (only GET is allowed)"
        )
    if request.body is not None:
        raise RequestValidationError("the request should not contain a body")
    if not request.url.scheme:
        raise RequestValidationError("a valid protocol scheme should be defined")
    if not request.url.host:
        raise RequestValidationError("a valid host should be defined")
