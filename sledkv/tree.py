"""
A tree is a named partition of the sled store, the equivalent of a table or a
collection. The Tree class binds a tree name to a client so that callers working
with one tree do not have to repeat its name on every call.
"""

from typing import List, Optional

from loguru import logger

from sledkv.api.client import SledClient


class Tree(object):
    """
    A named tree in the sled store. Trees are created implicitly by the server on
    first insert, so there is nothing to create up front:
    ```
    async with SledClient("http://localhost:3030") as client:
        users = Tree("users", client)
        await users.put("user1", "John Doe")
        value = await users.get("user1")  # "John Doe"
        await users.delete("user1")
    ```

    Each method forwards to exactly one client operation, so the same error
    semantics apply: a missing key gives None, other failures raise.
    """

    @staticmethod
    async def list_trees(client: SledClient) -> List[str]:
        """
        List all trees in the store.
        """
        trees = await client.list_all_trees()
        logger.debug(f"List of trees: {trees}")
        return trees

    def __init__(self, name: str, client: SledClient):
        """
        :param str name: the name of the tree
        :param SledClient client: the client to send requests with
        """
        self._name = name
        self._client = client

    @property
    def name(self) -> str:
        return self._name

    async def put(self, key: str, value: str) -> str:
        """
        Put a key-value pair in the tree.
        """
        return await self._client.tree_insert(self._name, key, value)

    async def get(self, key: str) -> Optional[str]:
        """
        Get the value of a key in the tree, or None if it does not exist.
        """
        return await self._client.tree_get(self._name, key)

    async def delete(self, key: str) -> str:
        """
        Delete a key-value pair in the tree.
        """
        return await self._client.tree_delete(self._name, key)

    async def keys(self) -> List[str]:
        """
        List keys in the tree.
        """
        return await self._client.tree_list_keys(self._name)

    async def contains(self, key: str) -> bool:
        return await self.get(key) is not None

    def __repr__(self) -> str:
        return f"Tree({self._name!r}, url={self._client.url!r})"
