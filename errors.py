"""Error types raised by the contact form handlers and the record store."""


class ContactFormError(Exception):
    """Base class for every error this service raises."""


class ValidationError(ContactFormError):
    """A required field is missing from a submission."""


class StoreError(ContactFormError):
    """The DynamoDB call failed.

    The message is the underlying boto3 error text, unchanged, so it can be
    returned to the caller for diagnostics.
    """
