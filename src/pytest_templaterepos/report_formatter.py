"""Formatting utilities for test report generation.

This module provides functions to format the HTTP requests and responses
exchanged with the template API for display in pytest test reports.
"""

import json

import httpx


def _format_body(content: bytes, content_type: str) -> str:
    if "application/json" in content_type:
        try:
            return json.dumps(json.loads(content), indent=2, ensure_ascii=False)
        except (json.JSONDecodeError, UnicodeDecodeError):
            pass
    try:
        return content.decode()
    except UnicodeDecodeError:
        return f"<Binary content: {len(content)} bytes>"


def format_request(request: httpx.Request) -> str:
    lines = [f"{request.method} {request.url}"]

    for key, value in request.headers.items():
        if key.lower() == "cookie":
            value = "<redacted>"
        lines.append(f"{key}: {value}")

    content = request.read()
    if content:
        lines.append("")
        lines.append(_format_body(content, request.headers.get("Content-Type", "")))

    return "\n".join(lines)


def format_response(response: httpx.Response) -> str:
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]

    for key, value in response.headers.items():
        lines.append(f"{key}: {value}")

    # Empty line between headers and body
    lines.append("")

    if response.content:
        lines.append(_format_body(response.content, response.headers.get("Content-Type", "")))

    return "\n".join(lines)
