"""Tests for request building and validation."""

import pytest
from yarl import URL

from opentransport.adapters.http.request_builder import (
    ApiRequest,
    build_request,
    validate_request,
)
from opentransport.domain.errors import ConstructionError, RequestValidationError
from opentransport.domain.models.request_context import RequestContext

BASE_URL = "https://transport.opendata.ch/v1/"


def test_build_request_appends_path_verbatim() -> None:
    """Given an escaped path, when building, then the URL keeps the escaping unchanged."""
    request = build_request(
        BASE_URL,
        "connections?from=Z%C3%BCrich&to=Bern&via[]=Aarau&time=14:30",
        "Testing",
    )

    assert str(request.url) == (
        "https://transport.opendata.ch/v1/connections?"
        "from=Z%C3%BCrich&to=Bern&via[]=Aarau&time=14:30"
    )
    assert request.method == "GET"
    assert request.body is None
    assert request.headers["User-Agent"] == "Testing"
    assert request.headers["Accept"] == "application/json"


def test_build_request_substitutes_background_context() -> None:
    """Given no context, when building, then a context without deadline is attached."""
    request = build_request(BASE_URL, "locations?query=Bern", "Testing")

    assert request.context == RequestContext.background()
    assert request.context.deadline is None


def test_build_request_binds_given_context() -> None:
    context = RequestContext.with_timeout(30)

    request = build_request(BASE_URL, "locations?query=Bern", "Testing", context)

    assert request.context is context


def test_built_request_is_valid() -> None:
    validate_request(build_request(BASE_URL, "stationboard?station=Bern", "Testing"))


@pytest.mark.parametrize(
    ("request_", "message"),
    [
        (ApiRequest(method="POST", url=URL(BASE_URL)), "invalid http method POST"),
        (ApiRequest(method="DELETE", url=URL(BASE_URL)), "invalid http method DELETE"),
        (ApiRequest(method="PUT", url=URL(BASE_URL)), "invalid http method PUT"),
        (
            ApiRequest(method="GET", url=URL(BASE_URL), body=b"request with a body"),
            "should not contain a body",
        ),
        (ApiRequest(method="GET", url=URL("transport.opendata.ch")), "protocol scheme should"),
        (ApiRequest(method="GET", url=URL("/v1/locations")), "protocol scheme should"),
        (ApiRequest(method="GET", url=URL("file:///tmp/locations")), "valid host"),
    ],
)
def test_validate_request_names_the_violated_rule(request_: ApiRequest, message: str) -> None:
    """Given a request violating one rule, when validating, then the error names that rule."""
    with pytest.raises(RequestValidationError, match=message):
        validate_request(request_)


def test_build_request_rejects_unparsable_url() -> None:
    """Given a base URL that cannot be parsed, when building, then ConstructionError is raised."""
    with pytest.raises(ConstructionError, match="failed to create new request"):
        build_request("http://[::1/", "locations", "Testing")
