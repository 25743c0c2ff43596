"""
Filter service module: the artist filter pipeline
"""
from .relation_service import RelationService


class FilterService:
    """
    Service class for narrowing the artist list.

    Each stage returns a new list and keeps the relative order of the artists
    it retains. Stages run in the order of apply_filters, each one fed with the
    output of the previous stage.
    """

    @staticmethod
    def _has_member_matching(artist, needle):
        return any(needle in member.lower() for member in artist.members)

    @staticmethod
    def search_by_name_or_member(artists, search):
        """Keep artists whose name, or one of whose members, contains search (case-insensitive)"""
        # An empty search is contained in every name, so it keeps everything
        needle = search.lower()
        return [artist for artist in artists
                if needle in artist.name.lower()
                or FilterService._has_member_matching(artist, needle)]

    @staticmethod
    def filter_by_member_search(artists, member_search):
        """Keep artists with at least one member containing member_search"""
        if not member_search:
            return list(artists)
        needle = member_search.lower()
        return [artist for artist in artists
                if FilterService._has_member_matching(artist, needle)]

    @staticmethod
    def filter_by_member_count(artists, counts):
        """Keep artists whose member count is one of counts; no counts means no filter"""
        if not counts:
            return list(artists)
        return [artist for artist in artists if len(artist.members) in counts]

    @staticmethod
    def filter_by_creation_year(artists, min_year, max_year):
        """Keep artists formed within [min_year, max_year]"""
        return [artist for artist in artists
                if min_year <= artist.creation_date <= max_year]

    @staticmethod
    def filter_by_country(artists, relations, country):
        """Keep artists with at least one location in country (exact, case-sensitive)"""
        if not country:
            return list(artists)
        return [artist for artist in artists
                if any(RelationService.country_of(location) == country
                       for location in RelationService.locations_for_artist(artist, relations))]

    @staticmethod
    def apply_filters(artists, relations, query):
        """Run every filter stage for query"""
        filtered = FilterService.search_by_name_or_member(artists, query.search)
        filtered = FilterService.filter_by_member_search(filtered, query.member_search)
        filtered = FilterService.filter_by_member_count(filtered, query.num_members)
        filtered = FilterService.filter_by_creation_year(filtered, query.min_year, query.max_year)
        return FilterService.filter_by_country(filtered, relations, query.country)
