# Print every stored contact form submission.
#
# Usage:
#   python list_submissions.py
#   python list_submissions.py --table ContactFormSubmissions-staging

import argparse
import sys

from errors import StoreError
from record_store import DynamoRecordStore


def format_submission(item):
    return " - {id}  {createdAt}  [{status}]  {email}  {name}".format(
        id=item.get("id", ""),
        createdAt=item.get("createdAt", ""),
        status=item.get("status", ""),
        email=item.get("email", ""),
        name=item.get("name", ""),
    )


def main(argv=None, store=None):
    parser = argparse.ArgumentParser(description="List contact form submissions.")
    parser.add_argument("--table", help="DynamoDB table name (defaults to $TABLE_NAME)")
    args = parser.parse_args(argv)

    if store is None:
        store = DynamoRecordStore.from_config(args.table)

    try:
        items = store.scan_all()
    except StoreError as e:
        print(f"❌ Could not scan submissions: {e}", file=sys.stderr)
        return 1

    print("Submissions:")
    for item in sorted(items, key=lambda i: i.get("createdAt", "")):
        print(format_submission(item))
    print(f"\nTotal: {len(items)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
