"""
Relation service module: countries derived from the relation index
"""


class RelationService:
    """Service class for relation lookups"""

    @staticmethod
    def country_of(location):
        """Country part of a "location,country" key: last comma segment, trimmed"""
        return location.split(',')[-1].strip()

    @staticmethod
    def locations_for_artist(artist, relations):
        """
        Every location recorded for an artist, across all relation entries.

        An entry sharing the artist's id contributes its location keys; an entry
        keyed by the artist's name contributes that key's values.
        """
        locations = []
        for entry in relations.index:
            if artist.name in entry.dates_locations:
                locations.extend(entry.dates_locations[artist.name])
            elif entry.id == artist.id:
                locations.extend(entry.dates_locations)
        return locations

    @staticmethod
    def country_for_artist(artist_name, relations):
        """
        Country of the first location listed under the artist's name.

        Only the first entry with a non-empty value for that name is read, so a
        single country is reported per artist. Returns '' when there is none.
        """
        for entry in relations.index:
            locations = entry.dates_locations.get(artist_name)
            if locations:
                return RelationService.country_of(locations[0])
        return ''

    @staticmethod
    def unique_countries(relations):
        """Sorted, de-duplicated countries across every relation entry"""
        countries = set()
        for entry in relations.index:
            for location in entry.dates_locations:
                countries.add(RelationService.country_of(location))
        return sorted(countries)
