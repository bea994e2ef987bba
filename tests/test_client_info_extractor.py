"""Behavior-focused tests for client information extraction."""

from whoami_service.application.client_info_extractor import (
    collect_headers,
    decode_header_value,
    extract_client_info,
    extract_client_ip,
    extract_user_agent,
)
from whoami_service.domain.models import InboundRequest


def _request(*headers: tuple[bytes, bytes], peer_host: str | None = "10.0.0.1") -> InboundRequest:
    return InboundRequest(method="GET", path="/", headers=tuple(headers), peer_host=peer_host)


class TestExtractClientIp:
    """Tests for client IP resolution order."""

    def test_when_x_forwarded_for_has_chain_then_returns_first_ip(self) -> None:
        """Given X-Forwarded-For with IP chain, when extracting, then returns original client IP."""
        request = _request(
            (b"x-forwarded-for", b"1.2.3.4, 5.6.7.8"),
            (b"x-real-ip", b"9.9.9.9"),
        )

        assert extract_client_ip(request) == "1.2.3.4"

    def test_when_x_forwarded_for_has_whitespace_then_trims_ip(self) -> None:
        """Given X-Forwarded-For with whitespace, when extracting, then returns trimmed IP."""
        request = _request((b"x-forwarded-for", b"  192.168.1.1  , 10.0.0.1"))

        assert extract_client_ip(request) == "192.168.1.1"

    def test_when_x_forwarded_for_is_malformed_then_passes_it_through(self) -> None:
        """Given a non-IP X-Forwarded-For, when extracting, then returns it verbatim."""
        request = _request((b"x-forwarded-for", b"not-an-ip"))

        assert extract_client_ip(request) == "not-an-ip"

    def test_when_x_forwarded_for_is_empty_then_returns_empty_string(self) -> None:
        """Given an empty X-Forwarded-For, when extracting, then it still wins over the peer."""
        request = _request((b"x-forwarded-for", b""))

        assert extract_client_ip(request) == ""

    def test_when_header_name_has_mixed_case_then_still_recognized(self) -> None:
        """Given X-Forwarded-For in mixed case, when extracting, then it is used."""
        request = _request((b"X-Forwarded-For", b"203.0.113.50"))

        assert extract_client_ip(request) == "203.0.113.50"

    def test_when_only_x_real_ip_then_returns_it(self) -> None:
        """Given only X-Real-IP, when extracting, then returns its full value."""
        request = _request((b"x-real-ip", b"9.9.9.9"))

        assert extract_client_ip(request) == "9.9.9.9"

    def test_when_x_forwarded_for_is_not_text_then_falls_back_to_x_real_ip(self) -> None:
        """Given undecodable X-Forwarded-For, when extracting, then X-Real-IP is used."""
        request = _request(
            (b"x-forwarded-for", b"\xff\xfe"),
            (b"x-real-ip", b"9.9.9.9"),
        )

        assert extract_client_ip(request) == "9.9.9.9"

    def test_when_no_forwarding_headers_then_uses_peer_host(self) -> None:
        """Given no forwarding headers, when extracting, then uses the peer IP exactly."""
        request = _request((b"host", b"example.test"), peer_host="203.0.113.5")

        assert extract_client_ip(request) == "203.0.113.5"

    def test_when_no_peer_and_no_headers_then_returns_unknown(self) -> None:
        """Given no client information, when extracting, then returns 'unknown'."""
        request = _request(peer_host=None)

        assert extract_client_ip(request) == "unknown"


class TestExtractUserAgent:
    """Tests for user agent resolution."""

    def test_when_user_agent_present_then_returns_it_exactly(self) -> None:
        """Given a User-Agent header, when extracting, then returns its text."""
        request = _request((b"user-agent", b"TestBrowser/1.0 (TestOS)"))

        assert extract_user_agent(request) == "TestBrowser/1.0 (TestOS)"

    def test_when_user_agent_missing_then_returns_unknown(self) -> None:
        """Given no User-Agent, when extracting, then returns 'Unknown'."""
        assert extract_user_agent(_request()) == "Unknown"

    def test_when_user_agent_not_text_then_returns_unknown(self) -> None:
        """Given a User-Agent with non-text bytes, when extracting, then returns 'Unknown'."""
        request = _request((b"user-agent", "Browsér".encode("latin-1")))

        assert extract_user_agent(request) == "Unknown"


class TestCollectHeaders:
    """Tests for header collection."""

    def test_when_value_not_text_then_header_is_dropped(self) -> None:
        """Given a header with non-text bytes, when collecting, then only that header is omitted."""
        request = _request(
            (b"accept", b"*/*"),
            (b"x-binary", b"\x00\x01"),
            (b"x-ok", b"yes"),
        )

        assert collect_headers(request) == {"accept": "*/*", "x-ok": "yes"}

    def test_when_name_repeats_then_last_value_wins(self) -> None:
        """Given duplicate header names, when collecting, then the last occurrence is kept."""
        request = _request((b"x-dup", b"first"), (b"x-dup", b"second"))

        assert collect_headers(request) == {"x-dup": "second"}

    def test_when_names_differ_in_case_then_both_are_kept(self) -> None:
        """Given names differing only in case, when collecting, then keys are kept as delivered."""
        request = _request((b"Accept", b"a"), (b"accept", b"b"))

        assert collect_headers(request) == {"Accept": "a", "accept": "b"}

    def test_when_headers_collected_then_arrival_order_is_kept(self) -> None:
        """Given several headers, when collecting, then mapping order follows arrival."""
        request = _request((b"b", b"1"), (b"a", b"2"), (b"c", b"3"))

        assert list(collect_headers(request)) == ["b", "a", "c"]


class TestDecodeHeaderValue:
    """Tests for header value text decoding."""

    def test_visible_ascii_and_tab_are_text(self) -> None:
        """Given visible ASCII with a tab, when decoding, then returns the string."""
        assert decode_header_value(b"a b\tc~") == "a b\tc~"

    def test_high_bytes_are_not_text(self) -> None:
        """Given bytes above 0x7E, when decoding, then returns None."""
        assert decode_header_value("café".encode()) is None

    def test_control_bytes_are_not_text(self) -> None:
        """Given a control byte, when decoding, then returns None."""
        assert decode_header_value(b"a\x7fb") is None


def test_extract_client_info_combines_all_parts() -> None:
    """Given a full request, when extracting, then IP, user agent and headers are set."""
    request = _request(
        (b"host", b"example.test"),
        (b"user-agent", b"TestBot/1.0"),
        peer_host="198.51.100.42",
    )

    client_info = extract_client_info(request)

    assert client_info.ip == "198.51.100.42"
    assert client_info.user_agent == "TestBot/1.0"
    assert client_info.headers == {"host": "example.test", "user-agent": "TestBot/1.0"}
