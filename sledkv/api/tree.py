from typing import List, Optional

from .api_resource import APIResource, path_segment
from .types import TreeOperation


class TreeAPI(APIResource):
    async def insert(self, tree: str, key: str, value: str) -> str:
        """
        Insert a value under key in the given tree. Returns the server's message.
        """
        operation = TreeOperation(tree=tree, key=key, value=value)
        response = await self._post("/tree/insert", json=self.safe_json(operation))
        return self.ensure_text(response)

    async def get(self, tree: str, key: str) -> Optional[str]:
        """
        Get the value of key in the given tree, or None if the key does not exist.
        """
        response = await self._get(
            f"/tree/get/{path_segment(tree)}/{path_segment(key)}"
        )
        return self.ensure_optional_text(response)

    async def delete(self, tree: str, key: str) -> str:
        """
        Delete key from the given tree. Returns the server's message.
        """
        response = await self._delete(
            f"/tree/delete/{path_segment(tree)}/{path_segment(key)}"
        )
        return self.ensure_text(response)

    async def list_keys(self, tree: str) -> List[str]:
        """
        List the keys of the given tree.
        """
        response = await self._get(f"/tree/list/{path_segment(tree)}")
        return self.ensure_string_list(response)

    async def list_trees(self) -> List[str]:
        """
        List all trees in the store.
        """
        response = await self._get("/trees")
        return self.ensure_string_list(response)
