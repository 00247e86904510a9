# flake8: noqa
from .api_resource import (
    APIResource,
    ClientError,
    RemoteError,
    ServerError,
    strip_json_quotes,
)
from .client import SledClient
from .types import KeyValue, TreeOperation
