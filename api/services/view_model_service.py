"""
View model service module: the data handed to index.html
"""
from .relation_service import RelationService
from ..models.view_model import ViewModel


class ViewModelService:
    """Service class for assembling the template context"""

    @staticmethod
    def get_artist_names(artists):
        return [artist.name for artist in artists]

    @staticmethod
    def get_artist_members(artists):
        """Members of every artist, flattened in artist order"""
        return [member for artist in artists for member in artist.members]

    @staticmethod
    def get_artist_creation_dates(artists):
        return [artist.creation_date for artist in artists]

    @staticmethod
    def build_view_model(artists, relations, query):
        """Package the final artist list and its derived lists"""
        return ViewModel(
            artists=list(artists),
            relations=relations,
            countries=RelationService.unique_countries(relations),
            artist_names=ViewModelService.get_artist_names(artists),
            artist_members=ViewModelService.get_artist_members(artists),
            artist_creation=ViewModelService.get_artist_creation_dates(artists),
            artist_search=query.search,
            member_search=query.member_search,
        )
