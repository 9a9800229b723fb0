# tests/conftest.py
import pytest

from catalog_profiles.profiles.schemas import FetchResult
from catalog_profiles.records.schemas import DatasetRecord, SearchResult

ORDERS_URN = "urn:li:dataset:(urn:li:dataPlatform:hive,analytics.orders,PROD)"
VIEW_URN = "urn:li:dataset:(urn:li:dataPlatform:snowflake,analytics.active_customers,PROD)"
DBT_URN = "urn:li:dataset:(urn:li:dataPlatform:dbt,analytics.active_customers,PROD)"

HIVE = {
    "urn": "urn:li:dataPlatform:hive",
    "name": "hive",
    "properties": {"displayName": "Hive", "logoUrl": "/logos/hive.png"},
}
SNOWFLAKE = {
    "urn": "urn:li:dataPlatform:snowflake",
    "name": "snowflake",
    "properties": {"displayName": "Snowflake", "logoUrl": "/logos/snowflake.png"},
}
DBT = {
    "urn": "urn:li:dataPlatform:dbt",
    "name": "dbt",
    "properties": {"logoUrl": "/logos/dbt.png"},
}


def orders_payload() -> dict:
    return {
        "urn": ORDERS_URN,
        "name": "analytics.orders",
        "origin": "PROD",
        "properties": {
            "name": "orders",
            "description": "One row per order.",
            "externalUrl": "https://hive.example.com/orders",
            "qualifiedName": "warehouse.analytics.orders",
            "customProperties": [{"key": "retention", "value": "365d"}],
        },
        "editableProperties": {"description": "Customer orders, deduplicated."},
        "platform": HIVE,
        "dataPlatformInstance": {"instanceId": "hive-prod"},
        "subTypes": {"typeNames": ["table"]},
        "ownership": {
            "owners": [
                {
                    "owner": {"urn": "urn:li:corpuser:jdoe", "type": "CORP_USER"},
                    "type": "TECHNICAL_OWNER",
                }
            ]
        },
        "domain": {"domain": {"urn": "urn:li:domain:sales", "name": "Sales"}},
        "upstream": {"total": 2},
        "downstream": {"total": 5},
        "readRuns": {"total": 3},
        "writeRuns": {"total": 0},
        "assertions": {"total": 1},
        "usageStats": {"buckets": [{"bucket": 1700000000000}]},
        "datasetProfiles": [{"timestampMillis": 1700000000000, "rowCount": 1250}],
        "statsSummary": {"queryCountLast30Days": 42},
    }


def view_payload() -> dict:
    return {
        "urn": VIEW_URN,
        "name": "analytics.active_customers",
        "properties": {"name": "active_customers"},
        "platform": SNOWFLAKE,
        "subTypes": {"typeNames": ["view"]},
        "viewProperties": {"materialized": False, "logic": "SELECT 1", "language": "SQL"},
        "siblings": {
            "isPrimary": True,
            "siblings": [{"urn": DBT_URN, "name": "analytics.active_customers", "platform": DBT}],
        },
    }


@pytest.fixture
def orders() -> DatasetRecord:
    return DatasetRecord.model_validate(orders_payload())


@pytest.fixture
def view_dataset() -> DatasetRecord:
    return DatasetRecord.model_validate(view_payload())


@pytest.fixture
def search_hit() -> SearchResult:
    entity = view_payload()
    entity["lastProfile"] = [{"rowCount": 900}, {"rowCount": 800}]
    entity["lastOperation"] = [{"lastUpdatedTimestamp": 1700000001000}]
    entity["deprecation"] = {"deprecated": True, "note": "Use active_customers_v2"}
    return SearchResult.model_validate(
        {
            "entity": entity,
            "matchedFields": [
                {"name": "name", "value": "active_customers"},
                {"name": "fieldPaths", "value": "customer_id"},
            ],
            "insights": [{"text": "Frequently queried"}],
        }
    )


class StaticFetcher:
    """Fetcher returning a fixed result."""

    def __init__(self, result: FetchResult):
        self.result = result
        self.fetched: list[str] = []

    async def fetch(self, urn: str) -> FetchResult:
        self.fetched.append(urn)
        return self.result

    async def update(self, urn: str, update) -> FetchResult:
        return self.result


class FailingFetcher:
    """Fetcher whose transport blows up."""

    async def fetch(self, urn: str) -> FetchResult:
        raise ConnectionError("graphql endpoint unreachable")

    async def update(self, urn: str, update) -> FetchResult:
        raise ConnectionError("graphql endpoint unreachable")
