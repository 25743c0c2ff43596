import pytest

from api.models.artist import Artist, RelationEntry, RelationSet


def make_artist(id=1, name='Queen', members=('Freddie', 'Brian'), creation_date=1970,
                first_album='13-07-1973', image='https://img.test/queen.jpg'):
    return Artist(id=id, image=image, name=name, members=tuple(members),
                  creation_date=creation_date, first_album=first_album)


@pytest.fixture
def artists():
    return [
        make_artist(1, 'Queen', ('Freddie Mercury', 'Brian May', 'Roger Taylor', 'John Deacon'),
                    1970, '14-12-1973'),
        make_artist(2, 'Pink Floyd', ('Roger Waters', 'David Gilmour', 'Nick Mason'),
                    1965, '05-08-1967'),
        make_artist(3, 'Bobby McFerrins', ('Bobby McFerrin',), 1977, '01-01-1982'),
        make_artist(4, 'ACDC', ('Angus Young', 'Brian Johnson'), 1973, '17-02-1975'),
    ]


@pytest.fixture
def relations():
    return RelationSet(index=(
        RelationEntry(id=1, dates_locations={'london,UK': ('01-01-2019',), 'paris,France': ('02-01-2019',)}),
        RelationEntry(id=2, dates_locations={'berlin,Germany': ('03-01-2019',)}),
        RelationEntry(id=3, dates_locations={}),
        RelationEntry(id=4, dates_locations={'sydney,Australia': ('04-01-2019',), 'lyon,France': ('05-01-2019',)}),
    ))


ARTISTS_PAYLOAD = [
    {'id': 1, 'image': 'https://img.test/queen.jpg', 'name': 'Queen',
     'members': ['Freddie', 'Brian'], 'creationDate': 1970, 'firstAlbum': '13-07-1973'},
    {'id': 2, 'image': 'https://img.test/floyd.jpg', 'name': 'Pink Floyd',
     'members': ['Roger Waters', 'David Gilmour', 'Nick Mason'], 'creationDate': 1965,
     'firstAlbum': '05-08-1967'},
]

RELATIONS_PAYLOAD = {'index': [
    {'id': 1, 'datesLocations': {'04-07-1970-Paris,France': ['04-07-1970']}},
    {'id': 2, 'datesLocations': {'Berlin, Germany': ['01-02-1972']}},
]}


class FakeResponse:
    """Minimal stand-in for requests.Response"""

    def __init__(self, payload=None, status_code=200, reason='OK', body=None):
        self.payload = payload
        self.status_code = status_code
        self.reason = reason
        self.body = body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def json(self):
        if self.body is not None:
            raise ValueError(f"Expecting value: {self.body!r}")
        return self.payload


class UpstreamStub:
    """Serves canned responses per URL and records the requested URLs"""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def get(self, url, *args, **kwargs):
        self.calls.append(url)
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_upstream(monkeypatch):
    """Route requests.get to canned payloads"""
    from utils.config import CONFIG

    responses = {
        CONFIG['ARTISTS_URL']: FakeResponse(ARTISTS_PAYLOAD),
        CONFIG['RELATIONS_URL']: FakeResponse(RELATIONS_PAYLOAD),
    }
    stub = UpstreamStub(responses)
    monkeypatch.setattr('api.services.fetch_service.requests.get', stub.get)
    return stub


@pytest.fixture
def client():
    from app import create_app

    app = create_app()
    app.config['TESTING'] = True
    return app.test_client()


@pytest.fixture
def name_keyed_relations():
    """Relation entries keyed by artist name, each holding "location,country" values"""
    return RelationSet(index=(
        RelationEntry(id=1, dates_locations={'Queen': ('london,UK', 'paris,France')}),
        RelationEntry(id=2, dates_locations={'Pink Floyd': ('berlin,Germany',)}),
        RelationEntry(id=4, dates_locations={'ACDC': ('sydney,Australia',)}),
    ))
