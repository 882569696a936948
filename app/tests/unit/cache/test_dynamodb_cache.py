"""Unit tests for the DynamoDB route cache store."""

import json
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from translated_routes.cache.dynamodb import DEFAULT_TABLE, DynamoDBRouteCache

pytestmark = pytest.mark.unit


def client_error(operation="GetItem"):
    return ClientError(
        {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "x"}},
        operation,
    )


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def cache(client):
    return DynamoDBRouteCache(table_name="routes_table", client=client)


class TestDynamoDBRouteCacheInitialization:
    """Tests for DynamoDBRouteCache initialization."""

    @patch("translated_routes.cache.dynamodb.boto3")
    def test_creates_client_with_region(self, mock_boto3):
        """A boto3 client is created when none is injected."""
        cache = DynamoDBRouteCache(region_name="ca-central-1")
        mock_boto3.client.assert_called_once_with(
            "dynamodb", region_name="ca-central-1"
        )
        assert cache.table_name == DEFAULT_TABLE

    def test_uses_injected_client(self, client):
        cache = DynamoDBRouteCache(client=client)
        assert cache._client is client  # pylint: disable=protected-access


class TestDynamoDBRouteCacheGet:
    """Tests for DynamoDBRouteCache.get()."""

    def test_returns_none_on_miss(self, cache, client):
        client.get_item.return_value = {}
        assert cache.get("translated_routes.tr") is None
        client.get_item.assert_called_once_with(
            TableName="routes_table",
            Key={"cache_key": {"S": "translated_routes.tr"}},
        )

    def test_returns_routes_on_hit(self, cache, client):
        client.get_item.return_value = {
            "Item": {
                "cache_key": {"S": "translated_routes.tr"},
                "routes_json": {"S": json.dumps({"about": "hakkimizda"})},
            }
        }
        assert cache.get("translated_routes.tr") == {"about": "hakkimizda"}

    @patch("translated_routes.cache.dynamodb.time")
    def test_expired_item_is_a_miss(self, mock_time, cache, client):
        """Items past their ttl are ignored even if DynamoDB has not deleted them."""
        mock_time.time.return_value = 2000
        client.get_item.return_value = {
            "Item": {
                "routes_json": {"S": "{}"},
                "ttl": {"N": "1999"},
            }
        }
        assert cache.get("k") is None

    def test_client_error_is_a_miss(self, cache, client):
        client.get_item.side_effect = client_error()
        assert cache.get("k") is None

    def test_corrupt_item_is_a_miss(self, cache, client):
        client.get_item.return_value = {"Item": {"routes_json": {"S": "not json"}}}
        assert cache.get("k") is None


class TestDynamoDBRouteCacheSet:
    """Tests for DynamoDBRouteCache.set()."""

    @patch("translated_routes.cache.dynamodb.time")
    def test_put_item_with_ttl(self, mock_time, cache, client):
        mock_time.time.return_value = 1000
        cache.set("translated_routes.tr", {"about": "hakkımızda"}, ttl_seconds=60)

        item = client.put_item.call_args.kwargs["Item"]
        assert client.put_item.call_args.kwargs["TableName"] == "routes_table"
        assert item["cache_key"] == {"S": "translated_routes.tr"}
        assert json.loads(item["routes_json"]["S"]) == {"about": "hakkımızda"}
        assert item["created_at"] == {"N": "1000"}
        assert item["ttl"] == {"N": "1060"}

    def test_put_item_without_ttl(self, cache, client):
        cache.set("k", {})
        assert "ttl" not in client.put_item.call_args.kwargs["Item"]

    @patch("translated_routes.cache.dynamodb.time")
    def test_default_ttl_applies(self, mock_time, client):
        mock_time.time.return_value = 1000
        cache = DynamoDBRouteCache(client=client, default_ttl_seconds=100)
        cache.set("k", {})
        assert client.put_item.call_args.kwargs["Item"]["ttl"] == {"N": "1100"}

    def test_client_error_is_swallowed(self, cache, client):
        client.put_item.side_effect = client_error("PutItem")
        cache.set("k", {"a": "1"})


class TestDynamoDBRouteCacheEviction:
    """Tests for forget() and clear()."""

    def test_forget_existing_item(self, cache, client):
        client.delete_item.return_value = {"Attributes": {"cache_key": {"S": "k"}}}
        assert cache.forget("k") is True
        client.delete_item.assert_called_once_with(
            TableName="routes_table",
            Key={"cache_key": {"S": "k"}},
            ReturnValues="ALL_OLD",
        )

    def test_forget_missing_item(self, cache, client):
        client.delete_item.return_value = {}
        assert cache.forget("k") is False

    def test_forget_client_error(self, cache, client):
        client.delete_item.side_effect = client_error("DeleteItem")
        assert cache.forget("k") is False

    def test_clear_follows_scan_pages(self, cache, client):
        client.scan.side_effect = [
            {
                "Items": [{"cache_key": {"S": "a"}}],
                "LastEvaluatedKey": {"cache_key": {"S": "a"}},
            },
            {"Items": [{"cache_key": {"S": "b"}}]},
        ]
        cache.clear()

        assert client.scan.call_count == 2
        assert client.scan.call_args_list[1].kwargs["ExclusiveStartKey"] == {
            "cache_key": {"S": "a"}
        }
        deleted = [c.kwargs["Key"] for c in client.delete_item.call_args_list]
        assert deleted == [{"cache_key": {"S": "a"}}, {"cache_key": {"S": "b"}}]

    def test_clear_client_error_is_swallowed(self, cache, client):
        client.scan.side_effect = client_error("Scan")
        cache.clear()
        client.delete_item.assert_not_called()


class TestDynamoDBRouteCacheStats:
    """Tests for get_stats()."""

    def test_stats(self, client):
        cache = DynamoDBRouteCache(client=client, default_ttl_seconds=30)
        assert cache.get_stats() == {
            "backend": "dynamodb",
            "table_name": DEFAULT_TABLE,
            "ttl_seconds": 30,
            "partition_key": "cache_key",
        }
