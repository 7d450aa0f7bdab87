import httpx
import pytest
import respx

from adapters.aoc_input import AocInputSource, fetch_input, input_url
from core.config import AppSettings
from core.domain.errors import HttpStatusError, MissingCredentialError, NetworkError
from core.domain.models import ScaffoldRequest

BASE_URL = "https://aoc.test"
INPUT_URL = f"{BASE_URL}/2024/day/1/input"


def test_input_url_does_not_pad_day_and_ignores_trailing_slash():
    assert input_url(1, 2024, "https://adventofcode.com/") == "https://adventofcode.com/2024/day/1/input"
    assert input_url(25, 2015, "https://adventofcode.com") == "https://adventofcode.com/2015/day/25/input"


@respx.mock
def test_fetch_sends_session_cookie_and_user_agent(settings):
    route = respx.get(INPUT_URL).mock(return_value=httpx.Response(200, text="Test input data\n"))

    assert fetch_input(1, 2024, settings=settings) == "Test input data"

    assert route.call_count == 1
    request = route.calls.last.request
    assert request.headers["cookie"] == "session=test_cookie"
    assert request.headers["user-agent"] == settings.user_agent


@respx.mock
def test_trailing_whitespace_is_trimmed_once(settings):
    route = respx.get(INPUT_URL).mock(return_value=httpx.Response(200, text="Test data \n"))

    assert fetch_input(1, 2024, settings=settings) == "Test data"
    assert route.call_count == 1


@respx.mock
def test_leading_whitespace_is_preserved(settings):
    respx.get(INPUT_URL).mock(return_value=httpx.Response(200, text="  \n  1 2\n3 4   \n\n\n"))

    assert fetch_input(1, 2024, settings=settings) == "  \n  1 2\n3 4"


@respx.mock
def test_explicit_base_url_wins_over_settings(settings):
    route = respx.get("http://localhost:8080/2024/day/3/input").mock(
        return_value=httpx.Response(200, text="local")
    )

    assert fetch_input(3, 2024, base_url="http://localhost:8080", settings=settings) == "local"
    assert route.called


def test_missing_session_fails_without_network_call(anonymous_settings):
    with respx.mock(assert_all_called=False) as mock:
        route = mock.get(INPUT_URL).mock(return_value=httpx.Response(200, text="never"))

        with pytest.raises(MissingCredentialError) as excinfo:
            fetch_input(1, 2024, settings=anonymous_settings)

    assert not route.called
    assert excinfo.value.kind == "missing-credential"


def test_template_placeholder_counts_as_missing():
    settings = AppSettings(_env_file=None, session="your_session_cookie_here", base_url=BASE_URL)

    with respx.mock(assert_all_called=False) as mock:
        route = mock.get(INPUT_URL)
        with pytest.raises(MissingCredentialError):
            fetch_input(1, 2024, settings=settings)

    assert not route.called


def test_session_read_from_environment(monkeypatch):
    monkeypatch.setenv("AOC_SESSION", "from_env")

    with respx.mock:
        route = respx.get(INPUT_URL).mock(return_value=httpx.Response(200, text="ok"))
        fetch_input(1, 2024, base_url=BASE_URL)

    assert route.calls.last.request.headers["cookie"] == "session=from_env"


@respx.mock
def test_not_found_raises_http_error(settings):
    route = respx.get(INPUT_URL).mock(return_value=httpx.Response(404))

    with pytest.raises(HttpStatusError) as excinfo:
        fetch_input(1, 2024, settings=settings)

    assert excinfo.value.status_code == 404
    assert excinfo.value.kind == "http-error"
    assert route.call_count == 1


@respx.mock
def test_redirect_is_not_followed(settings):
    # Una cookie caducada redirige al login; no debe acabar como input.
    respx.get(INPUT_URL).mock(
        return_value=httpx.Response(302, headers={"Location": f"{BASE_URL}/auth/login"})
    )

    with pytest.raises(HttpStatusError) as excinfo:
        fetch_input(1, 2024, settings=settings)

    assert excinfo.value.status_code == 302


@respx.mock
def test_transport_failure_raises_network_error(settings):
    route = respx.get(INPUT_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(NetworkError) as excinfo:
        fetch_input(1, 2024, settings=settings)

    assert "connection refused" in str(excinfo.value)
    assert route.call_count == 1


@respx.mock
def test_input_source_uses_request_day_and_year(settings):
    route = respx.get(f"{BASE_URL}/2022/day/12/input").mock(return_value=httpx.Response(200, text="grid\n"))

    source = AocInputSource(settings)

    assert source.fetch(ScaffoldRequest(day=12, year=2022)) == "grid"
    assert route.called
