# API Gateway Trigger - Contact Form Retrieval
#
# Use case: The form page lists stored submissions, or looks one up by id.
#
# Example Events:
#
# GET /submissions                       -> every record in the table
# GET /submissions?submissionId=<uuid>   -> that record, or null
#
# Handler path: fetch_submissions.lambda_handler

import logging

import config
from errors import StoreError
from http_responses import (
    Result,
    is_preflight,
    preflight_response,
    query_param,
    to_proxy_response,
)
from record_store import DynamoRecordStore

logger = logging.getLogger()
logger.setLevel(config.LOG_LEVEL)


def query(submission_id, store):
    """Look up one submission by id, or all of them when no id is given.

    An unknown id is not an error: the response carries ``data: null``.
    """
    try:
        if submission_id:
            data = store.get(submission_id)
            logger.info("🔎 Lookup %s: %s", submission_id, "found" if data else "not found")
        else:
            data = store.scan_all()
            logger.info("📋 Scanned %d submission(s)", len(data))
    except StoreError as e:
        logger.error("❌ Error fetching submissions: %s", e)
        return Result(500, {"error": "Failed to fetch data", "details": str(e)})

    return Result(200, {"message": "Data retrieved successfully", "data": data})


def build_handler(store):
    def lambda_handler(event, context):
        if is_preflight(event):
            return preflight_response()
        return to_proxy_response(query(query_param(event, "submissionId"), store))

    return lambda_handler


_default_handler = None


def lambda_handler(event, context):
    global _default_handler
    if _default_handler is None:
        _default_handler = build_handler(DynamoRecordStore.from_config())
    return _default_handler(event, context)
