"""
Operations on the store's default namespace, which predates trees.
"""

from typing import Optional

from .api_resource import APIResource, path_segment
from .types import KeyValue


class LegacyAPI(APIResource):
    async def insert(self, key: str, value: str) -> str:
        # tree stays None: the legacy endpoint ignores it, but it is part of the
        # payload the server expects.
        kv = KeyValue(key=key, value=value, tree=None)
        response = await self._post("/insert", json=self.safe_json(kv))
        return self.ensure_text(response)

    async def get(self, key: str) -> Optional[str]:
        response = await self._get(f"/get/{path_segment(key)}")
        return self.ensure_optional_text(response)
