"""Page-number pagination service over a cursor-only DynamoDB table."""

__version__ = "1.0.0"
