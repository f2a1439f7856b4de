# DynamoDB Record Store
#
# Thin wrapper around a boto3 Table resource. The handlers only ever need three
# calls: put one item, get one item by id, scan the whole table.
#
# Table setup (partition key only, no sort key):
#
# aws dynamodb create-table \
#   --table-name ContactFormSubmissions \
#   --attribute-definitions AttributeName=id,AttributeType=S \
#   --key-schema AttributeName=id,KeyType=HASH \
#   --billing-mode PAY_PER_REQUEST

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

import config
from errors import StoreError

logger = logging.getLogger(__name__)

# TypeError and ValueError come from boto3 serializing the item (e.g. floats).
STORE_ERRORS = (ClientError, BotoCoreError, TypeError, ValueError)


def get_table(table_name=None):
    dynamodb = boto3.resource(
        "dynamodb",
        region_name=config.AWS_REGION,
        endpoint_url=config.DYNAMODB_ENDPOINT_URL,
    )
    return dynamodb.Table(table_name or config.TABLE_NAME)


class DynamoRecordStore:
    """Submission records kept in a DynamoDB table keyed by ``id``."""

    def __init__(self, table):
        self.table = table

    @classmethod
    def from_config(cls, table_name=None):
        return cls(get_table(table_name))

    def put(self, item):
        try:
            self.table.put_item(Item=item)
        except STORE_ERRORS as e:
            raise StoreError(str(e)) from e

    def get(self, submission_id):
        """Return the record with this id, or None if there is none."""
        try:
            response = self.table.get_item(Key={"id": submission_id})
        except STORE_ERRORS as e:
            raise StoreError(str(e)) from e
        return response.get("Item")

    def scan_all(self):
        """Read every record in the table.

        A single Scan call returns at most 1 MB, so keep following
        LastEvaluatedKey until the table is exhausted.
        """
        items = []
        kwargs = {}
        try:
            while True:
                response = self.table.scan(**kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        except STORE_ERRORS as e:
            raise StoreError(str(e)) from e

        logger.debug("Scanned %d item(s) from %s", len(items), self.table.name)
        return items
