"""
Mutation result types

Each mutation returns a union of its success type and the failure kinds, so
callers can tell validation errors, missing targets and store failures apart
by ``__typename``.
"""

from typing import Annotated, Union

import strawberry

from .hotspot import Hotspot
from .movie import Movie
from .user import User


@strawberry.interface
class MutationError:
    message: str


@strawberry.type
class InvalidRequest(MutationError):
    """Required input was missing or malformed."""


@strawberry.type
class NotFound(MutationError):
    """The node the mutation depends on does not exist."""

    path: str


@strawberry.type
class StoreFailure(MutationError):
    """The database rejected or failed the operation."""


@strawberry.type
class DeletedHotspot:
    id: str
    movie_id: str


UserResult = Annotated[
    Union[User, InvalidRequest, StoreFailure],
    strawberry.union("UserResult"),
]

MovieResult = Annotated[
    Union[Movie, InvalidRequest, NotFound, StoreFailure],
    strawberry.union("MovieResult"),
]

HotspotResult = Annotated[
    Union[Hotspot, InvalidRequest, NotFound, StoreFailure],
    strawberry.union("HotspotResult"),
]

DeleteHotspotResult = Annotated[
    Union[DeletedHotspot, InvalidRequest, NotFound, StoreFailure],
    strawberry.union("DeleteHotspotResult"),
]
