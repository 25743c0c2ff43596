from typing import List, NamedTuple

from .artist import Artist, RelationSet


class ViewModel(NamedTuple):
    """Everything index.html needs for one render"""

    artists: List[Artist]
    relations: RelationSet
    countries: List[str]
    artist_names: List[str]
    artist_members: List[str]
    artist_creation: List[int]
    artist_search: str
    member_search: str
