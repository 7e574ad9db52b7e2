from reqres_collector.collector.headers import filter_request_headers, filter_response_headers
from reqres_collector.config import EXCLUDED_REQUEST_HEADERS, EXCLUDED_RESPONSE_HEADERS


class TestFilterResponseHeaders:
    def test_denied_header_removed(self):
        headers = {"X-Frame-Options": "SAMEORIGIN", "Content-Type": "application/json"}
        result = filter_response_headers(headers, EXCLUDED_RESPONSE_HEADERS)
        assert "X-Frame-Options" not in result
        assert result["Content-Type"] == "application/json"

    def test_prefix_match_removed(self):
        headers = {"X-Frame-Options-Custom": "1", "X-XSS-Protection": "1; mode=block"}
        result = filter_response_headers(headers, EXCLUDED_RESPONSE_HEADERS)
        assert result == {}

    def test_match_is_case_sensitive(self):
        headers = {"x-frame-options": "DENY"}
        result = filter_response_headers(headers, EXCLUDED_RESPONSE_HEADERS)
        assert result == {"x-frame-options": "DENY"}

    def test_input_not_mutated(self):
        headers = {"X-UA-Compatible": "IE=edge", "ETag": "abc"}
        filter_response_headers(headers, EXCLUDED_RESPONSE_HEADERS)
        assert headers == {"X-UA-Compatible": "IE=edge", "ETag": "abc"}

    def test_accepts_header_pairs(self):
        headers = [("Content-Type", "text/plain"), ("X-Content-Type-Options", "nosniff")]
        result = filter_response_headers(headers, EXCLUDED_RESPONSE_HEADERS)
        assert result == {"Content-Type": "text/plain"}

    def test_repeated_pair_keeps_last_value(self):
        headers = [("Set-Cookie", "a=1"), ("Set-Cookie", "b=2"), ("X-Frame-Options", "DENY")]
        result = filter_response_headers(headers, EXCLUDED_RESPONSE_HEADERS)
        assert result == {"Set-Cookie": "b=2"}

    def test_none_headers(self):
        assert filter_response_headers(None, EXCLUDED_RESPONSE_HEADERS) == {}


class TestFilterRequestHeaders:
    def test_keeps_application_headers(self):
        environ = {
            "wsgi.input": object(),
            "wsgiorg.routing_args": ((), {"controller": "users"}),
            "REQUEST_METHOD": "GET",
            "PATH_INFO": "/api/users",
            "HTTP_HOST": "example.org",
            "HTTP_COOKIE": "session=1",
            "HTTP_ACCEPT": "application/json",
            "HTTP_AUTHORIZATION": "Bearer token",
            "CONTENT_TYPE": "application/json",
        }
        result = filter_request_headers(environ, EXCLUDED_REQUEST_HEADERS)
        assert result == {
            "HTTP_ACCEPT": "application/json",
            "HTTP_AUTHORIZATION": "Bearer token",
            "CONTENT_TYPE": "application/json",
        }

    def test_custom_patterns(self):
        environ = {"HTTP_COOKIE": "a=1", "HTTP_X_TRACE": "abc", "wsgi.version": (1, 0)}
        result = filter_request_headers(environ, ["HTTP_X_"])
        assert result == {"HTTP_COOKIE": "a=1", "wsgi.version": (1, 0)}

    def test_empty_environ(self):
        assert filter_request_headers({}, EXCLUDED_REQUEST_HEADERS) == {}
        assert filter_request_headers(None, EXCLUDED_REQUEST_HEADERS) == {}
