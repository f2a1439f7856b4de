# API Gateway Trigger - Contact Form Submission
#
# Use case: A static HTML form POSTs a contact record; we validate it and
# write it to DynamoDB.
#
# Example Event:
#
# A POST request hits /submit with body
# {"name": "Alice", "email": "alice@example.com", "message": "Hi", "status": "New"}
#
# Handler path: submit_form.lambda_handler

import datetime
import logging
import uuid

import config
from errors import StoreError, ValidationError
from http_responses import (
    Result,
    is_preflight,
    load_json_object,
    parse_body,
    preflight_response,
    to_proxy_response,
)
from record_store import DynamoRecordStore

logger = logging.getLogger()
logger.setLevel(config.LOG_LEVEL)

DEFAULT_STATUS = "New"


def _field(body, name, default):
    # Stored as DynamoDB strings so they read back exactly as sent.
    value = body.get(name)
    return default if value is None else str(value)


def build_record(body):
    """Turn a parsed form body into a submission record ready to store."""
    email = body.get("email")
    if not isinstance(email, str) or not email.strip():
        raise ValidationError("Email is required.")

    return {
        "id": str(uuid.uuid4()),
        "name": _field(body, "name", ""),
        "email": email,
        "message": _field(body, "message", ""),
        "status": str(body.get("status") or DEFAULT_STATUS),
        "createdAt": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }


def submit(request_body, store):
    body = load_json_object(request_body)

    try:
        record = build_record(body)
    except ValidationError as e:
        logger.warning("⚠️ Rejected submission: %s", e)
        return Result(400, {"error": str(e)})

    try:
        store.put(record)
    except StoreError as e:
        logger.error("❌ Error saving submission: %s", e)
        return Result(500, {"error": "Failed to process submission.", "details": str(e)})

    logger.info("📨 Saved submission %s", record["id"])
    return Result(200, {"message": "Form submitted successfully!", "submissionId": record["id"]})


def build_handler(store):
    def lambda_handler(event, context):
        if is_preflight(event):
            return preflight_response()
        return to_proxy_response(submit(parse_body(event), store))

    return lambda_handler


_default_handler = None


def lambda_handler(event, context):
    # Built on first invocation and reused while the container stays warm.
    global _default_handler
    if _default_handler is None:
        _default_handler = build_handler(DynamoRecordStore.from_config())
    return _default_handler(event, context)
