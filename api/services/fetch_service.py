"""
Fetch service module for reading the upstream artist and relation APIs
"""
from typing import List

import requests
from pydantic import TypeAdapter, ValidationError
from requests import RequestException

from utils.logger import logger
from .errors import DecodeError, TransportError, UpstreamStatusError
from ..models.artist import Artist, RelationSet

ARTISTS_ADAPTER = TypeAdapter(List[Artist])


class FetchService:
    """Service class for upstream HTTP calls"""

    @staticmethod
    def fetch_json(url):
        """GET url and return the decoded JSON body"""
        logger(f"Fetching {url}", "DEBUG")
        try:
            response = requests.get(url)
        except RequestException as e:
            raise TransportError(f"HTTP request to {url} failed: {e}") from e

        with response:
            if response.status_code != 200:
                raise UpstreamStatusError(response.status_code, response.reason or '')
            try:
                return response.json()
            except ValueError as e:
                raise DecodeError(f"JSON decoding of {url} failed: {e}") from e

    @staticmethod
    def fetch_artists(url):
        """Fetch and validate the artist list"""
        data = FetchService.fetch_json(url)
        try:
            artists = ARTISTS_ADAPTER.validate_python(data)
        except ValidationError as e:
            raise DecodeError(f"Unexpected artists payload from {url}: {e}") from e
        logger(f"Fetched {len(artists)} artists", "DEBUG")
        return artists

    @staticmethod
    def fetch_relations(url):
        """Fetch and validate the relation index"""
        data = FetchService.fetch_json(url)
        try:
            relations = RelationSet.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Unexpected relations payload from {url}: {e}") from e
        logger(f"Fetched {len(relations.index)} relation entries", "DEBUG")
        return relations
