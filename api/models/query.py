"""
Filter and sort parameters of one request
"""
import re
from typing import FrozenSet, NamedTuple

from utils.config import CONFIG

INTEGER_REGEX = re.compile(r'[+-]?[0-9]+')


class Query(NamedTuple):
    """
    User supplied filters for the artist listing.

    Every field is optional on the wire; missing values mean "no constraint",
    except the year bounds which fall back to CONFIG's unbounded range.
    """

    search: str = ''
    member_search: str = ''
    sort_by: str = ''
    order_by: str = ''
    min_year: int = 0
    max_year: int = 9999
    num_members: FrozenSet[int] = frozenset()
    country: str = ''

    @classmethod
    def from_args(cls, args):
        """Parse a request's query string (werkzeug MultiDict or plain dict)"""
        raw_counts = args.getlist('numMembers') if hasattr(args, 'getlist') else args.get('numMembers', [])
        if isinstance(raw_counts, str):
            raw_counts = [raw_counts]

        return cls(
            search=args.get('searchQuery', ''),
            member_search=args.get('memberSearch', ''),
            sort_by=args.get('sortBy', ''),
            order_by=args.get('orderBy', ''),
            min_year=parse_int(args.get('minYear'), CONFIG['DEFAULT_MIN_YEAR']),
            max_year=parse_int(args.get('maxYear'), CONFIG['DEFAULT_MAX_YEAR']),
            num_members=frozenset(
                count for count in (parse_int(value, None) for value in raw_counts)
                if count is not None),
            country=args.get('country', ''),
        )


def parse_int(value, default):
    """Integer value of a query parameter: optional sign then digits, else default"""
    if not isinstance(value, str) or not INTEGER_REGEX.fullmatch(value):
        return default
    return int(value)
