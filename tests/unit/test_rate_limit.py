from starlette.requests import Request

from motoparts.core.rate_limit import get_client_ip


def _request(headers=None, client=("10.0.0.5", 5000)) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/api/orders",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": client,
    }
    return Request(scope)


def test_client_ip_from_connection():
    assert get_client_ip(_request()) == "10.0.0.5"


def test_client_ip_prefers_first_forwarded_address():
    request = _request({"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})

    assert get_client_ip(request) == "203.0.113.7"


def test_client_ip_from_real_ip_header():
    assert get_client_ip(_request({"X-Real-IP": " 198.51.100.4 "})) == "198.51.100.4"
