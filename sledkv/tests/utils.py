"""
Test helpers: an in-memory stand-in for the sled server, mounted on respx routes.
"""

import json
import random
import string
from typing import Dict
from urllib.parse import unquote

import httpx
import respx

TEST_URL = "http://sled.test"


def random_name():
    return "".join(random.choice(string.ascii_lowercase) for _ in range(8))


class FakeSledServer(object):
    """
    Mimics the store's endpoints closely enough for the client: values are echoed
    as json strings, missing keys are 404s, listings are json arrays.
    """

    def __init__(self, url: str = TEST_URL):
        self.url = url
        self.trees: Dict[str, Dict[str, str]] = {}
        self.default: Dict[str, str] = {}

    def mount(self, router: respx.MockRouter):
        u = self.url
        router.get(f"{u}/health").mock(side_effect=self._health)
        router.post(f"{u}/tree/insert").mock(side_effect=self._tree_insert)
        router.get(url__regex=rf"^{u}/tree/get/(?P<tree>[^/]+)/(?P<key>[^/]+)$").mock(
            side_effect=self._tree_get
        )
        router.delete(
            url__regex=rf"^{u}/tree/delete/(?P<tree>[^/]+)/(?P<key>[^/]+)$"
        ).mock(side_effect=self._tree_delete)
        router.get(url__regex=rf"^{u}/tree/list/(?P<tree>[^/]+)$").mock(
            side_effect=self._tree_list
        )
        router.get(f"{u}/trees").mock(side_effect=self._trees)
        router.post(f"{u}/insert").mock(side_effect=self._insert)
        router.get(url__regex=rf"^{u}/get/(?P<key>[^/]+)$").mock(side_effect=self._get)

    def _health(self, request):
        return httpx.Response(200, json="OK")

    def _tree_insert(self, request):
        body = json.loads(request.content)
        self.trees.setdefault(body["tree"], {})[body["key"]] = body["value"]
        return httpx.Response(200, json="Inserted")

    def _tree_get(self, request, tree, key):
        value = self.trees.get(unquote(tree), {}).get(unquote(key))
        if value is None:
            return httpx.Response(404, text="Key not found")
        return httpx.Response(200, json=value)

    def _tree_delete(self, request, tree, key):
        self.trees.get(unquote(tree), {}).pop(unquote(key), None)
        return httpx.Response(200, text="Deleted")

    def _tree_list(self, request, tree):
        return httpx.Response(200, json=list(self.trees.get(unquote(tree), {})))

    def _trees(self, request):
        return httpx.Response(200, json=list(self.trees))

    def _insert(self, request):
        body = json.loads(request.content)
        self.default[body["key"]] = body["value"]
        return httpx.Response(200, json="Inserted")

    def _get(self, request, key):
        value = self.default.get(unquote(key))
        if value is None:
            return httpx.Response(404, text="Key not found")
        return httpx.Response(200, json=value)
