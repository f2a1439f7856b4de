"""Shared fixtures for the contact form handler tests."""

import base64
import json

import pytest

from errors import StoreError


class FakeRecordStore:
    """In-memory stand-in for DynamoRecordStore.

    Set ``fail_with`` to make every call raise StoreError with that message.
    """

    def __init__(self):
        self.items = {}
        self.fail_with = None
        self.calls = []

    def _check(self, op):
        self.calls.append(op)
        if self.fail_with is not None:
            raise StoreError(self.fail_with)

    def put(self, item):
        self._check("put")
        self.items[item["id"]] = dict(item)

    def get(self, submission_id):
        self._check("get")
        item = self.items.get(submission_id)
        return dict(item) if item else None

    def scan_all(self):
        self._check("scan_all")
        return [dict(item) for item in self.items.values()]


@pytest.fixture
def store():
    return FakeRecordStore()


def post_event(body=None, raw=None, base64_encoded=False):
    """API Gateway REST (v1) proxy event for a POST."""
    if raw is None and body is not None:
        raw = json.dumps(body)
    if base64_encoded and raw is not None:
        raw = base64.b64encode(raw.encode("utf-8")).decode("ascii")
    return {
        "httpMethod": "POST",
        "path": "/submit",
        "body": raw,
        "isBase64Encoded": base64_encoded,
        "queryStringParameters": None,
    }


def get_event(submission_id=None):
    """API Gateway HTTP API (v2) proxy event for a GET."""
    event = {
        "version": "2.0",
        "rawPath": "/submissions",
        "requestContext": {"http": {"method": "GET"}},
    }
    if submission_id is not None:
        event["queryStringParameters"] = {"submissionId": submission_id}
    return event


def options_event():
    return {"httpMethod": "OPTIONS", "path": "/submit", "body": None}


def response_json(response):
    return json.loads(response["body"])
