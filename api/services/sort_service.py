"""
Sort service module: ordering of the filtered artist list
"""
import re
from datetime import datetime

from utils.logger import logger
from .relation_service import RelationService

FIRST_ALBUM_FORMAT = '%d-%m-%Y'
FIRST_ALBUM_REGEX = re.compile(r'[0-9]{2}-[0-9]{2}-[0-9]{4}')
SORT_DIRECTIONS = ('asc', 'desc')


def parse_year(date):
    """Year of a DD-MM-YYYY date; 0 when empty or unparsable"""
    if not date:
        return 0
    if not FIRST_ALBUM_REGEX.fullmatch(date):
        logger(f"Could not parse date {date!r}: expected DD-MM-YYYY", "WARNING")
        return 0
    try:
        return datetime.strptime(date, FIRST_ALBUM_FORMAT).year
    except ValueError as e:
        logger(f"Could not parse date {date!r}: {e}", "WARNING")
        return 0


class SortService:
    """Service class for sorting artists"""

    @staticmethod
    def sort_key(sort_by, relations):
        """Key function for sort_by, or None when the field is not sortable"""
        if sort_by == 'creationDate':
            return lambda artist: artist.creation_date
        if sort_by == 'firstAlbum':
            return lambda artist: parse_year(artist.first_album)
        if sort_by == 'country':
            return lambda artist: RelationService.country_for_artist(artist.name, relations)
        return None

    @staticmethod
    def sort_artists(artists, relations, sort_by='', order_by=''):
        """
        Stable sort of artists by sort_by in order_by direction.

        Ties keep their incoming order. An unknown field or direction sorts by
        name, ascending.
        """
        key = SortService.sort_key(sort_by, relations)
        if key is None or order_by not in SORT_DIRECTIONS:
            return sorted(artists, key=lambda artist: artist.name)
        # sorted() stays stable with reverse=True
        return sorted(artists, key=key, reverse=order_by == 'desc')
