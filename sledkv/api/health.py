from loguru import logger

from ..config import HEALTHY_BODY
from .api_resource import APIResource, strip_json_quotes


class HealthAPI(APIResource):
    async def check(self) -> bool:
        """
        Returns True if the server answers the health endpoint with "OK". A non
        success status gives False instead of an error; transport failures still
        propagate.
        """
        response = await self._get("/health")
        if not response.is_success:
            logger.debug(f"Health check returned {response.status_code}.")
            return False
        return strip_json_quotes(response.text) == HEALTHY_BODY
