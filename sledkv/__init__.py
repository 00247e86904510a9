# flake8: noqa
"""
Python client for the sled key-value store.
"""

from ._version import __version__

from .api.client import SledClient
from .api.api_resource import RemoteError, ClientError, ServerError
from .api.types import KeyValue, TreeOperation
from .tree import Tree
