from typing import TYPE_CHECKING, List, Optional, Union
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import BaseModel, TypeAdapter

from ..config import NOT_FOUND_STATUS

if TYPE_CHECKING:
    # only used for type hinting, but avoids circular imports
    from .client import SledClient


class RemoteError(RuntimeError):
    """
    Raised when the store answers with a status that the called operation does
    not accept. Carries the numeric status and the raw body text verbatim.
    """

    def __init__(self, response: httpx.Response):
        super().__init__(f"HTTP {response.status_code}: {response.text}")
        self.response = response
        self.status_code: int = response.status_code
        self.body: str = response.text


class ClientError(RemoteError):
    pass


class ServerError(RemoteError):
    pass


_string_list_adapter = TypeAdapter(List[str])


def strip_json_quotes(text: str) -> str:
    """
    Removes at most one leading and one trailing double quote from text.

    The store sometimes returns a string value JSON-encoded (`"John Doe"`) and
    sometimes raw (`John Doe`). This is a textual trim, not JSON decoding: escaped
    quotes inside the value are left untouched, and a value that itself starts or
    ends with a quote loses that quote.
    """
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


def path_segment(value: str) -> str:
    """
    Percent-encodes a tree name or key so that it stays a single path segment.
    A segment made only of dots is encoded too, otherwise `.` and `..` would be
    resolved away as dot segments and the request would hit another route.
    """
    encoded = quote(value, safe="")
    if encoded and encoded.strip(".") == "":
        return encoded.replace(".", "%2E")
    return encoded


class APIResource(object):
    """
    APIResource is the base class for a group of store endpoints. It is registered
    with the SledClient and provides the utility functions that turn raw responses
    into results, so that every endpoint classifies statuses the same way.

    If you are adding a new group of endpoints, subclass APIResource and register
    it in SledClient.__init__, for example:
        self.magic = MagicAPI(self)
    See sledkv/api/tree.py for an example.
    """

    _client: "SledClient"

    def __init__(self, _client: "SledClient"):
        """
        Initializes the APIResource with the SledClient object. You should not
        need to call this directly; the client creates its resources.
        """
        self._client = _client
        self._get = _client._get
        self._post = _client._post
        self._delete = _client._delete

    def _raise_if_not_ok(self, response: httpx.Response) -> httpx.Response:
        """
        Raise a RemoteError subclass if the response is not a 2xx.
        """
        if response.is_success:
            return response
        logger.debug(
            f"{response.request.method} {response.request.url} failed with"
            f" {response.status_code}: {response.text}"
        )
        if response.is_client_error:
            raise ClientError(response)
        elif response.is_server_error:
            raise ServerError(response)
        raise RemoteError(response)

    def ensure_text(self, response: httpx.Response) -> str:
        """
        Returns the unquoted body of a successful response.
        """
        self._raise_if_not_ok(response)
        return strip_json_quotes(response.text)

    def ensure_optional_text(self, response: httpx.Response) -> Optional[str]:
        """
        Like ensure_text, but a 404 means the key does not exist and gives None.
        """
        if response.status_code == NOT_FOUND_STATUS:
            logger.debug(f"{response.request.url} not found.")
            return None
        return self.ensure_text(response)

    def ensure_string_list(self, response: httpx.Response) -> List[str]:
        """
        Parses the body as a json array of strings. The status is not checked:
        a body that is not such an array raises pydantic's ValidationError.
        """
        return _string_list_adapter.validate_json(response.content)

    def safe_json(self, content: Union[BaseModel, dict]) -> dict:
        """
        Converts a payload model to a json serializable dictionary. None fields
        are kept so that they go on the wire as null.
        """
        if isinstance(content, BaseModel):
            return content.model_dump()
        elif isinstance(content, dict):
            return content
        else:
            raise ValueError("safe_json only accepts BaseModel or dict as input.")
