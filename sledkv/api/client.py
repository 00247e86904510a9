"""
The api/client module serves as the single entry point of all apis, holding the
base url of the store as well as the http session shared by every call.
"""

from typing import List, Optional

import httpx
from loguru import logger

from ..util import is_valid_url

# import the related API resources. Note that in all these files, they should
# not import the client to avoid circular imports.
from .health import HealthAPI
from .legacy import LegacyAPI
from .tree import TreeAPI


class SledClient(object):
    """
    An asynchronous client for the sled key-value store.

    The client is created from the base url of the store, e.g.
        client = SledClient("http://localhost:3030")
    and holds one http session that is reused across calls, including concurrent
    ones. Close it when done, either with `await client.aclose()` or by using it
    as an async context manager:
        async with SledClient("http://localhost:3030") as client:
            await client.tree_insert("users", "user1", "John Doe")
            value = await client.tree_get("users", "user1")

    Every method issues exactly one request. There are no retries, and timeouts
    are httpx's defaults.
    """

    def __init__(self, base_url: str):
        if not is_valid_url(base_url):
            raise ValueError(
                f"{base_url} is not a valid url. The base url should look like"
                " http://localhost:3030."
            )
        self.url: str = base_url.rstrip("/")
        self._session = httpx.AsyncClient()

        # Add individual APIs
        self.tree = TreeAPI(self)
        self.legacy = LegacyAPI(self)
        self.health = HealthAPI(self)

    async def __aenter__(self) -> "SledClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """
        Closes the underlying http session.
        """
        await self._session.aclose()

    async def _get(self, path: str, *args, **kwargs) -> httpx.Response:
        logger.trace(f"GET {self.url + path}")
        return await self._session.get(self.url + path, *args, **kwargs)

    async def _post(self, path: str, *args, **kwargs) -> httpx.Response:
        logger.trace(f"POST {self.url + path}")
        return await self._session.post(self.url + path, *args, **kwargs)

    async def _delete(self, path: str, *args, **kwargs) -> httpx.Response:
        logger.trace(f"DELETE {self.url + path}")
        return await self._session.delete(self.url + path, *args, **kwargs)

    # Tree operations.

    async def tree_insert(self, tree: str, key: str, value: str) -> str:
        """
        Inserts a value into a specific tree.
        """
        return await self.tree.insert(tree, key, value)

    async def tree_get(self, tree: str, key: str) -> Optional[str]:
        """
        Gets a value from a specific tree. Returns None if the key does not exist.
        """
        return await self.tree.get(tree, key)

    async def tree_delete(self, tree: str, key: str) -> str:
        """
        Deletes a key from a specific tree.
        """
        return await self.tree.delete(tree, key)

    async def tree_list_keys(self, tree: str) -> List[str]:
        """
        Lists all keys of a specific tree.
        """
        return await self.tree.list_keys(tree)

    async def list_all_trees(self) -> List[str]:
        """
        Lists all trees in the store.
        """
        return await self.tree.list_trees()

    # Legacy operations, against the default namespace.

    async def insert(self, key: str, value: str) -> str:
        return await self.legacy.insert(key, value)

    async def get(self, key: str) -> Optional[str]:
        return await self.legacy.get(key)

    async def health_check(self) -> bool:
        """
        Returns True if the server reports itself healthy.
        """
        return await self.health.check()
