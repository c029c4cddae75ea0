import boto3
import pytest
import requests
from botocore.stub import Stubber
from sqlalchemy import create_engine

from users_service import ServiceConfig, create_app
from users_service.store import DynamoRecordStore, SqlRecordStore


@pytest.fixture
def sql_store(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'users.db'}", future=True)
    return SqlRecordStore(engine, "Users")


@pytest.fixture
def service_app(sql_store):
    return create_app(ServiceConfig(store_backend="sql"), store=sql_store)


@pytest.fixture
def client(service_app):
    return service_app.test_client()


@pytest.fixture
def dynamo_table():
    dynamodb = boto3.resource(
        "dynamodb",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    return dynamodb.Table("Users")


@pytest.fixture
def stubber(dynamo_table):
    with Stubber(dynamo_table.meta.client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def dynamo_client(dynamo_table):
    app = create_app(ServiceConfig(), store=DynamoRecordStore(dynamo_table))
    return app.test_client()


class _ShimResponse:
    def __init__(self, resp):
        self._resp = resp
        self.status_code = resp.status_code

    def json(self):
        return self._resp.get_json()

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FlaskSession:
    """Just enough of requests.Session to point the UI client at a Flask test client."""

    def __init__(self, test_client, base_url):
        self.test_client = test_client
        self.base_url = base_url
        self.calls = []

    def _path(self, url):
        assert url.startswith(self.base_url)
        return url[len(self.base_url):]

    def get(self, url, **kwargs):
        self.calls.append(("GET", self._path(url)))
        return _ShimResponse(self.test_client.get(self._path(url), **kwargs))

    def post(self, url, **kwargs):
        self.calls.append(("POST", self._path(url)))
        return _ShimResponse(self.test_client.post(self._path(url), **kwargs))


@pytest.fixture
def api_session(client):
    return FlaskSession(client, "http://api.test")
