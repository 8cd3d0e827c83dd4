"""Test utilities and helper functions.

Builders for raw DynamoDB Query responses, in the low-level attribute-map
format (``{"S": "..."}``) the aioboto3 client returns.

Usage:
    from tests.utils import query_response, cursor_after

    client.query.side_effect = [
        query_response("item1", "item2", last_evaluated_key=cursor_after("item2")),
        query_response("item3"),
    ]
"""

from __future__ import annotations

from typing import Any


def make_item(partition_key: str, sort_key: str) -> dict[str, Any]:
    """Build a low-level DynamoDB item as the Query API returns it."""
    return {"key_cond": {"S": partition_key}, "sort_key": {"S": sort_key}}


def query_response(
    *sort_keys: str,
    partition_key: str = "test",
    last_evaluated_key: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a Query response with one item per sort key."""
    response: dict[str, Any] = {
        "Items": [make_item(partition_key, sk) for sk in sort_keys],
        "Count": len(sort_keys),
    }
    if last_evaluated_key is not None:
        response["LastEvaluatedKey"] = last_evaluated_key
    return response


def cursor_after(sort_key: str, partition_key: str = "test") -> dict[str, Any]:
    """LastEvaluatedKey pointing just past ``sort_key``."""
    return make_item(partition_key, sort_key)


def sort_keys_of(body: dict[str, Any]) -> list[str]:
    """Sort keys of the entries in a /paginate response body."""
    return [entry["sort_key"] for entry in body["Data"]]
