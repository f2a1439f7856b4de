# API Gateway proxy helpers
#
# Both handlers are invoked through API Gateway's Lambda proxy integration.
# REST APIs (v1) put the method in event['httpMethod']; HTTP APIs (v2) put it
# in event['requestContext']['http']['method']. Responses must be a dict with
# statusCode / headers / body, where body is a JSON string.

import base64
import binascii
import json
from collections import namedtuple

import config

Result = namedtuple("Result", ["status_code", "payload"])


def cors_headers():
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": config.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": config.CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": config.CORS_ALLOW_HEADERS,
    }


def to_proxy_response(result):
    # DynamoDB hands numbers back as Decimal, which json can't encode.
    return {
        "statusCode": result.status_code,
        "headers": cors_headers(),
        "body": json.dumps(result.payload, default=str),
    }


def http_method(event):
    method = event.get("httpMethod")
    if not method:
        method = event.get("requestContext", {}).get("http", {}).get("method", "")
    return method.upper()


def is_preflight(event):
    return http_method(event) == "OPTIONS"


def preflight_response():
    return to_proxy_response(Result(200, {}))


def query_param(event, name):
    params = event.get("queryStringParameters") or {}
    return params.get(name) or None


def load_json_object(raw):
    """Return ``raw`` as a dict.

    Accepts an already-parsed dict or a JSON string. Anything missing,
    unparsable, or not a JSON object comes back as an empty dict.
    """
    if isinstance(raw, dict):
        return raw
    if not raw:
        return {}

    try:
        body = json.loads(raw)
    except (TypeError, ValueError):
        return {}

    return body if isinstance(body, dict) else {}


def parse_body(event):
    raw = event.get("body")
    if raw and event.get("isBase64Encoded"):
        try:
            raw = base64.b64decode(raw).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return {}
    return load_json_object(raw)
