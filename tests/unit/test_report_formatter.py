import httpx

from pytest_templaterepos.report_formatter import format_request, format_response


def test_format_request_redacts_cookie():
    request = httpx.Request(
        "POST",
        "http://pfe.local:9090/api/v1/templates/repositories",
        headers={"Cookie": "connect.sid=secret"},
        json={"url": "https://example.com/index.json"},
    )

    formatted = format_request(request)

    assert formatted.splitlines()[0] == "POST http://pfe.local:9090/api/v1/templates/repositories"
    assert "cookie: <redacted>" in formatted
    assert "secret" not in formatted
    assert '"url": "https://example.com/index.json"' in formatted


def test_format_response_json_body():
    response = httpx.Response(200, json=[{"url": "u"}])

    formatted = format_response(response)

    lines = formatted.splitlines()
    assert lines[0] == "HTTP/1.1 200 OK"
    assert '    "url": "u"' in lines


def test_format_response_without_body():
    formatted = format_response(httpx.Response(204))

    assert formatted.startswith("HTTP/1.1 204 No Content")
    assert formatted.endswith("\n")


def test_format_response_binary_body():
    response = httpx.Response(200, content=b"\xff\xfe\x00", headers={"Content-Type": "application/octet-stream"})

    assert format_response(response).endswith("<Binary content: 3 bytes>")
