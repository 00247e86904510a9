"""
End-to-end tests against a running sled server. Set SLEDKV_TEST_URL, e.g. to
http://localhost:3030, to run them.
"""

import os
import unittest

from loguru import logger

from sledkv import SledClient
from sledkv.tests.utils import random_name

TEST_URL = os.environ.get("SLEDKV_TEST_URL")


@unittest.skipIf(TEST_URL is None, "SLEDKV_TEST_URL not set. Skipping test.")
class TestLiveServer(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.client = SledClient(TEST_URL)
        self.prefix = "test-" + random_name()
        logger.debug(f"Running live tests with prefix {self.prefix}")

    async def asyncTearDown(self):
        await self.client.aclose()

    async def test_health_check(self):
        self.assertTrue(await self.client.health_check())

    async def test_tree_operations(self):
        tree = self.prefix + "-users"
        await self.client.tree_insert(tree, "user1", "John Doe")
        self.assertEqual(await self.client.tree_get(tree, "user1"), "John Doe")
        await self.client.tree_delete(tree, "user1")
        self.assertIsNone(await self.client.tree_get(tree, "user1"))

    async def test_tree_listing(self):
        tree = self.prefix + "-products"
        await self.client.tree_insert(tree, "prod1", "Laptop")
        await self.client.tree_insert(tree, "prod2", "Mouse")
        keys = await self.client.tree_list_keys(tree)
        self.assertIn("prod1", keys)
        self.assertIn("prod2", keys)
        self.assertIn(tree, await self.client.list_all_trees())
        await self.client.tree_delete(tree, "prod1")
        await self.client.tree_delete(tree, "prod2")

    async def test_legacy_operations(self):
        key = self.prefix + "-legacy_key"
        await self.client.insert(key, "legacy_value")
        self.assertEqual(await self.client.get(key), "legacy_value")


if __name__ == "__main__":
    unittest.main()
