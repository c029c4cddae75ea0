"""
Record store adapters.

The service never owns durable state: every request is one call into a
store. A store is anything with ``put(item)`` and ``scan()``; the two
adapters here cover DynamoDB (the production table) and any SQL database
SQLAlchemy can reach (handy for running the service locally on sqlite).

Errors are not caught here. A failed put or scan raises straight through
to the HTTP layer.
"""

import json
import logging
from decimal import Decimal
from typing import Any, Dict, List

import boto3
from sqlalchemy import JSON, Boolean, Column, MetaData, String, Table, create_engine
from sqlalchemy.engine import Engine

from .config import STORE_BACKENDS, ServiceConfig

logger = logging.getLogger(__name__)

Item = Dict[str, Any]


def get_dynamodb_table(config: ServiceConfig):
    dynamodb = boto3.resource(
        "dynamodb",
        region_name=config.region,
        endpoint_url=config.endpoint_url,
    )
    return dynamodb.Table(config.table_name)


def _to_dynamo(item: Item) -> Item:
    # boto3 rejects float; numbers go in as Decimal
    return json.loads(json.dumps(item), parse_float=Decimal)


def _from_dynamo(value: Any) -> Any:
    # numbers come back as Decimal; hand the caller plain JSON numbers again
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: _from_dynamo(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_from_dynamo(v) for v in value]
    return value


class DynamoRecordStore:
    """Put/Scan against a boto3 DynamoDB ``Table`` resource."""

    def __init__(self, table):
        self.table = table

    def put(self, item: Item) -> None:
        self.table.put_item(Item=_to_dynamo(item))

    def scan(self) -> List[Item]:
        # Single scan call: if DynamoDB paginates, only the first page comes back.
        resp = self.table.scan()
        return [_from_dynamo(item) for item in resp.get("Items", [])]


class SqlRecordStore:
    """
    Put/Scan against a SQL table (id, name, has_name).

    ``name`` is a JSON column so numbers, objects and null keep their type.
    ``has_name`` tells an explicit null apart from a name that was never sent.
    """

    def __init__(self, engine: Engine, table_name: str = "Users"):
        self.engine = engine
        self.metadata = MetaData()
        self.table = Table(
            table_name,
            self.metadata,
            Column("id", String, primary_key=True),
            Column("name", JSON, nullable=True),
            Column("has_name", Boolean, nullable=False, default=False),
        )
        # Ensure table exists on startup
        self.metadata.create_all(engine)

    def put(self, item: Item) -> None:
        # Overwrite by id, same as a DynamoDB put
        with self.engine.begin() as conn:
            conn.execute(self.table.delete().where(self.table.c.id == item["id"]))
            conn.execute(
                self.table.insert().values(
                    id=item["id"],
                    name=item.get("name"),
                    has_name="name" in item,
                )
            )

    def scan(self) -> List[Item]:
        with self.engine.connect() as conn:
            rows = conn.execute(self.table.select()).mappings().all()

        items = []
        for row in rows:
            item = {"id": row["id"]}
            if row["has_name"]:
                item["name"] = row["name"]
            items.append(item)
        return items


def build_store(config: ServiceConfig):
    logger.info("Using %s record store, table %s", config.store_backend, config.table_name)
    if config.store_backend == "dynamodb":
        return DynamoRecordStore(get_dynamodb_table(config))
    if config.store_backend == "sql":
        engine = create_engine(config.database_uri, future=True)
        return SqlRecordStore(engine, config.table_name)
    raise ValueError(
        f"Unknown store backend {config.store_backend!r}, expected one of {STORE_BACKENDS}"
    )
