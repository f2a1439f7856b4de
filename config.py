# Environment configuration shared by the Lambda handlers and scripts.
#
# Set these in the Lambda environment (or via Terraform/CloudFormation):
#
# Variable               Example
# TABLE_NAME             ContactFormSubmissions
# AWS_REGION             us-east-1
# DYNAMODB_ENDPOINT_URL  http://localhost:8000   (DynamoDB Local only)
# CORS_ALLOW_ORIGIN      https://forms.example.com
# LOG_LEVEL              DEBUG

import logging
import os

TABLE_NAME = os.environ.get("TABLE_NAME", "ContactFormSubmissions")
AWS_REGION = os.environ.get("AWS_REGION") or None
DYNAMODB_ENDPOINT_URL = os.environ.get("DYNAMODB_ENDPOINT_URL") or None

CORS_ALLOW_ORIGIN = os.environ.get("CORS_ALLOW_ORIGIN", "*")
CORS_ALLOW_METHODS = "GET,POST,OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token"


def log_level(name):
    """Map a level name to its logging constant, falling back to INFO."""
    level = logging.getLevelName((name or "").upper())
    return level if isinstance(level, int) else logging.INFO


LOG_LEVEL = log_level(os.environ.get("LOG_LEVEL", "INFO"))
