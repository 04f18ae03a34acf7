"""Response helpers for the serverless HTTP handlers in api/."""

import base64
import json

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
}


def create_response(body, status: int = 200, headers: dict = None):
    """Create a JSON response object for the serverless runtime."""
    response_headers = {
        "Content-Type": "application/json",
        **CORS_HEADERS,
    }
    if headers:
        response_headers.update(headers)

    if isinstance(body, (dict, list)):
        body = json.dumps(body)

    return {
        "statusCode": status,
        "headers": response_headers,
        "body": body,
    }


def create_binary_response(content: bytes, content_type: str, headers: dict = None):
    """Create a response carrying binary content, base64-encoded."""
    response_headers = {
        "Content-Type": content_type,
        **CORS_HEADERS,
    }
    if headers:
        response_headers.update(headers)

    return {
        "statusCode": 200,
        "headers": response_headers,
        "body": base64.b64encode(content).decode("ascii"),
        "isBase64Encoded": True,
    }


def preflight_response(methods: str):
    """Answer a CORS preflight request."""
    return create_response(
        "",
        status=204,
        headers={
            "Access-Control-Allow-Methods": methods,
            "Access-Control-Allow-Headers": "Content-Type",
        },
    )
