"""Tests for verbgate.overrides — effective method resolution."""

import pytest

from verbgate.overrides import OVERRIDE_HEADERS, override_source, resolve_method
from verbgate.testing import make_request


class TestOverrideHeaders:
    def test_precedence_order(self) -> None:
        assert OVERRIDE_HEADERS == (
            "X-HTTP-Method",
            "X-HTTP-Method-Override",
            "X-METHOD-OVERRIDE",
            "x-tunneled-method",
        )


class TestResolveMethod:
    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "DELETE", "TRACE", "get"])
    def test_no_overrides_uses_wire_method(self, method: str) -> None:
        assert resolve_method(make_request(method)) == method

    @pytest.mark.parametrize("header", OVERRIDE_HEADERS)
    def test_each_header_overrides(self, header: str) -> None:
        request = make_request("POST", headers={header: "DELETE"})
        assert resolve_method(request) == "DELETE"

    def test_header_names_case_insensitive(self) -> None:
        request = make_request("POST", headers={"x-http-method-override": "PUT"})
        assert resolve_method(request) == "PUT"
        request = make_request("POST", headers={"X-TUNNELED-METHOD": "PATCH"})
        assert resolve_method(request) == "PATCH"

    def test_microsoft_beats_google(self) -> None:
        request = make_request(
            "POST",
            headers={"X-HTTP-Method-Override": "PUT", "X-HTTP-Method": "DELETE"},
        )
        assert resolve_method(request) == "DELETE"

    def test_full_precedence_chain(self) -> None:
        headers = {
            "x-tunneled-method": "D",
            "X-METHOD-OVERRIDE": "C",
            "X-HTTP-Method-Override": "B",
        }
        assert resolve_method(make_request("POST", headers=headers)) == "B"
        del headers["X-HTTP-Method-Override"]
        assert resolve_method(make_request("POST", headers=headers)) == "C"
        del headers["X-METHOD-OVERRIDE"]
        assert resolve_method(make_request("POST", headers=headers)) == "D"

    def test_empty_value_is_skipped(self) -> None:
        request = make_request(
            "POST",
            headers={"X-HTTP-Method": "", "X-METHOD-OVERRIDE": "PUT"},
        )
        assert resolve_method(request) == "PUT"

    def test_all_empty_falls_back(self) -> None:
        request = make_request("POST", headers={name: "" for name in OVERRIDE_HEADERS})
        assert resolve_method(request) == "POST"

    def test_value_passed_through_as_is(self) -> None:
        request = make_request("POST", headers={"X-HTTP-Method": "not a verb"})
        assert resolve_method(request) == "not a verb"

    def test_unrelated_headers_ignored(self) -> None:
        request = make_request("POST", headers={"X-Method": "PUT", "Method": "DELETE"})
        assert resolve_method(request) == "POST"

    def test_custom_header_names(self) -> None:
        request = make_request(
            "POST",
            headers={"X-HTTP-Method": "PUT", "X-Custom-Verb": "PATCH"},
        )
        assert resolve_method(request, ("X-Custom-Verb",)) == "PATCH"
        assert resolve_method(request, ()) == "POST"


class TestOverrideSource:
    def test_none_without_overrides(self) -> None:
        assert override_source(make_request("GET")) is None

    def test_names_winning_header(self) -> None:
        request = make_request(
            "POST",
            headers={"x-tunneled-method": "PUT", "X-METHOD-OVERRIDE": "PATCH"},
        )
        assert override_source(request) == "X-METHOD-OVERRIDE"
