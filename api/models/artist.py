"""
Pydantic models for the artist and relation API payloads
"""
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class Artist(BaseModel):
    """
    One performing act as returned by the artists endpoint.

    Attributes:
        id: Upstream identifier, shared with the matching relation entry
        image: URL of the artist picture
        name: Display name
        members: Member names, in upstream order
        creation_date: Year the act was formed
        first_album: First album release date, formatted DD-MM-YYYY
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictInt
    image: StrictStr
    name: StrictStr
    members: Tuple[StrictStr, ...]
    creation_date: StrictInt = Field(alias='creationDate')
    first_album: StrictStr = Field(alias='firstAlbum')


class RelationEntry(BaseModel):
    """Tour history of one artist: location key -> dates played there"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictInt
    dates_locations: Dict[StrictStr, Tuple[StrictStr, ...]] = Field(alias='datesLocations')


class RelationSet(BaseModel):
    """The whole relation payload: {"index": [...]}"""

    model_config = ConfigDict(frozen=True)

    index: Tuple[RelationEntry, ...] = ()
