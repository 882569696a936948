"""DynamoDB route cache store."""

import json
import time
from typing import Any, Dict, Optional

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from translated_routes.cache.base import RouteCacheStore

logger = structlog.get_logger()

DEFAULT_TABLE = "translated_routes_cache"
PARTITION_KEY = "cache_key"


class DynamoDBRouteCache(RouteCacheStore):
    """DynamoDB-backed RouteMap store shared by every server process.

    Table layout:
    - PK: cache_key (string)
    - Attributes: routes_json, ttl (for DynamoDB TTL), created_at

    DynamoDB deletes expired items lazily, so expiry is also checked on read.
    Backend failures are logged and reported as cache misses; a broken cache
    must never prevent a route from being translated.
    """

    def __init__(
        self,
        table_name: str = DEFAULT_TABLE,
        client: Any = None,
        region_name: Optional[str] = None,
        default_ttl_seconds: Optional[int] = None,
    ):
        """Initialize DynamoDB cache.

        Args:
            table_name: DynamoDB table name.
            client: Optional pre-built boto3 DynamoDB client.
            region_name: AWS region used when creating the client.
            default_ttl_seconds: Expiry applied when set() gets no ttl.
        """
        self.table_name = table_name
        self.default_ttl_seconds = default_ttl_seconds
        self._client = client or boto3.client("dynamodb", region_name=region_name)
        logger.info(
            "initialized_dynamodb_route_cache",
            table_name=table_name,
            region=region_name,
        )

    def _key(self, key: str) -> Dict[str, Any]:
        return {PARTITION_KEY: {"S": key}}

    def get(self, key: str) -> Optional[Dict[str, str]]:
        try:
            result = self._client.get_item(TableName=self.table_name, Key=self._key(key))
        except (BotoCoreError, ClientError) as e:
            logger.error(
                "route_cache_get_error",
                key=key,
                error=str(e),
                exc_info=True,
            )
            return None

        item = result.get("Item")
        if not item:
            logger.debug("route_cache_miss", key=key)
            return None

        ttl_attr = item.get("ttl", {}).get("N")
        if ttl_attr is not None and int(ttl_attr) <= int(time.time()):
            logger.debug("route_cache_expired", key=key)
            return None

        try:
            routes = json.loads(item["routes_json"]["S"])
        except (KeyError, TypeError, ValueError) as e:
            logger.error("route_cache_decode_error", key=key, error=str(e))
            return None

        logger.debug("route_cache_hit", key=key)
        return routes

    def set(
        self, key: str, routes: Dict[str, str], ttl_seconds: Optional[int] = None
    ) -> None:
        if ttl_seconds is None:
            ttl_seconds = self.default_ttl_seconds

        now = int(time.time())
        item = {
            PARTITION_KEY: {"S": key},
            "routes_json": {"S": json.dumps(routes, ensure_ascii=False)},
            "created_at": {"N": str(now)},
        }
        if ttl_seconds is not None:
            item["ttl"] = {"N": str(now + ttl_seconds)}

        try:
            self._client.put_item(TableName=self.table_name, Item=item)
        except (BotoCoreError, ClientError) as e:
            logger.error(
                "route_cache_set_error",
                key=key,
                error=str(e),
                exc_info=True,
            )
            return

        logger.debug("route_cache_set_success", key=key, ttl_seconds=ttl_seconds)

    def forget(self, key: str) -> bool:
        try:
            result = self._client.delete_item(
                TableName=self.table_name,
                Key=self._key(key),
                ReturnValues="ALL_OLD",
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(
                "route_cache_forget_error",
                key=key,
                error=str(e),
                exc_info=True,
            )
            return False

        return bool(result.get("Attributes"))

    def clear(self) -> None:
        """Delete every item in the table.

        Scans the whole table; intended for tests and operator use only.
        """
        logger.warning("route_cache_clear_called", backend="dynamodb")
        deleted = 0
        scan_kwargs: Dict[str, Any] = {
            "TableName": self.table_name,
            "ProjectionExpression": PARTITION_KEY,
        }
        try:
            while True:
                result = self._client.scan(**scan_kwargs)
                for item in result.get("Items", []):
                    key_value = item.get(PARTITION_KEY, {}).get("S")
                    if key_value:
                        self._client.delete_item(
                            TableName=self.table_name, Key=self._key(key_value)
                        )
                        deleted += 1
                last_key = result.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as e:
            logger.error("route_cache_clear_error", error=str(e), exc_info=True)
            return

        logger.info("route_cache_cleared", items_deleted=deleted)

    def get_stats(self) -> Dict[str, Any]:
        return {
            "backend": "dynamodb",
            "table_name": self.table_name,
            "ttl_seconds": self.default_ttl_seconds,
            "partition_key": PARTITION_KEY,
        }
