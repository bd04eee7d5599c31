"""Item payload models returned by the items API."""
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class _BaseStrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class Item(_BaseStrictModel):
    """A todo entry."""

    id: int
    name: str


class EchoEntry(_BaseStrictModel):
    """Echo of the URL the request was served for."""

    url: str


DEFAULT_ITEMS: Tuple[Item, ...] = (
    Item(id=1, name="Buy groceries"),
    Item(id=2, name="Finish SvelteKit project"),
    Item(id=3, name="Walk the dog"),
)
