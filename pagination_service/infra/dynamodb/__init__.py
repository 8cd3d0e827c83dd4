"""DynamoDB infrastructure: the cursor-paginated store behind /paginate."""

from pagination_service.infra.dynamodb.store import DynamoDBStore, deserialize_entry

__all__ = ["DynamoDBStore", "deserialize_entry"]
