from pydantic import BaseModel
from typing import Optional


class KeyValue(BaseModel):
    """
    Payload of a legacy insert. `tree` is part of the wire shape but the legacy
    endpoints do not read it, so the client always sends it as null.
    """

    key: str
    value: str
    tree: Optional[str] = None


class TreeOperation(BaseModel):
    """
    Payload of a tree-scoped operation. `value` is None for operations that do
    not carry one.
    """

    tree: str
    key: str
    value: Optional[str] = None
