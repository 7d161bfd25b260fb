import copy

import pytest

from footyhub.errors import FetchError

STANDINGS_PAYLOAD = {
    "competition": {"id": 2021, "name": "Premier League", "code": "PL"},
    "standings": [
        {
            "type": "TOTAL",
            "table": [
                {
                    "position": 1,
                    "team": {
                        "id": 64,
                        "name": "Liverpool FC",
                        "shortName": "Liverpool",
                        "crest": "https://crests.football-data.org/64.png",
                    },
                    "playedGames": 30,
                    "won": 19,
                    "draw": 3,
                    "lost": 8,
                    "points": 60,
                    "goalDifference": 20,
                    "form": "W,W,D,L,W",
                },
                {
                    "position": 2,
                    "team": {
                        "id": 57,
                        "name": "Arsenal FC",
                        "shortName": "Arsenal",
                        "crest": "https://crests.football-data.org/57.png",
                    },
                    "playedGames": 30,
                    "won": 15,
                    "draw": 5,
                    "lost": 10,
                    "points": 50,
                    "goalDifference": 10,
                    "form": None,
                },
                {
                    "position": 3,
                    "team": {"id": 73, "name": "Tottenham Hotspur FC", "shortName": None},
                    "playedGames": 30,
                    "won": 10,
                    "draw": 10,
                    "lost": 10,
                    "points": 40,
                    "goalDifference": 0,
                },
            ],
        }
    ],
}

LA_LIGA_PAYLOAD = {
    "competition": {"name": "Primera Division", "code": "PD"},
    "standings": [
        {
            "table": [
                {
                    "position": 1,
                    "team": {"id": 86, "name": "Real Madrid CF", "shortName": "Real Madrid"},
                    "playedGames": 10,
                    "won": 8,
                    "draw": 1,
                    "lost": 1,
                    "points": 25,
                    "goalDifference": 15,
                },
                {
                    "position": 2,
                    "team": {"id": 81, "name": "FC Barcelona", "shortName": "Barça"},
                    "playedGames": 10,
                    "won": 7,
                    "draw": 2,
                    "lost": 1,
                    "points": 23,
                    "goalDifference": 14,
                },
            ]
        }
    ],
}


def _match(match_id, status, home, away, score=(None, None), competition="Premier League"):
    return {
        "id": match_id,
        "utcDate": "2026-10-19T19:30:00Z",
        "status": status,
        "competition": {"name": competition} if competition else None,
        "homeTeam": {"id": home[0], "name": home[1], "shortName": home[1]},
        "awayTeam": {"id": away[0], "name": away[1], "shortName": away[1]},
        "score": {"fullTime": {"home": score[0], "away": score[1]}},
    }


MATCHES_PAYLOAD = {
    "matches": [
        _match(1, "FINISHED", (64, "Liverpool"), (57, "Arsenal"), (2, 1)),
        _match(2, "IN_PLAY", (73, "Spurs"), (61, "Chelsea"), (0, 0)),
        _match(3, "TIMED", (65, "Man City"), (66, "Man United")),
        _match(4, "SCHEDULED", (67, "Newcastle"), (58, "Aston Villa"), competition=None),
    ]
}


class FakeHubApi:
    """Stands in for HubApiClient; serves canned payloads and counts calls."""

    def __init__(self, responses=None, failing=()):
        self.responses = responses if responses is not None else {}
        self.failing = set(failing)
        self.calls = []

    def fetch(self, endpoint):
        self.calls.append(endpoint)
        if endpoint in self.failing or endpoint not in self.responses:
            raise FetchError("API Error")
        return copy.deepcopy(self.responses[endpoint])


@pytest.fixture
def standings_payload():
    return copy.deepcopy(STANDINGS_PAYLOAD)


@pytest.fixture
def la_liga_payload():
    return copy.deepcopy(LA_LIGA_PAYLOAD)


@pytest.fixture
def matches_payload():
    return copy.deepcopy(MATCHES_PAYLOAD)


@pytest.fixture
def fake_api():
    return FakeHubApi(
        {
            "standings/PL": STANDINGS_PAYLOAD,
            "standings/PD": LA_LIGA_PAYLOAD,
            "matches/today": MATCHES_PAYLOAD,
            "matches/PL": MATCHES_PAYLOAD,
        }
    )
