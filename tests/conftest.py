"""Shared pytest fixtures for the festival organizer test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from festival_organizer.interfaces.festival_api_provider import IFestivalAPIProvider
from festival_organizer.models.festival import RawFestival
from festival_organizer.providers.festival_api.decoder import decode_festivals

# Five festivals as served by the festivals API, including a band without a
# record label and a festival without a name.
FESTIVALS_JSON = (
    '[{"name":"LOL-palooza","bands":['
    '{"name":"Werewolf Weekday","recordLabel":"XS Recordings"},'
    '{"name":"Jill Black","recordLabel":"Fourth Woman Records"},'
    '{"name":"Frank Jupiter","recordLabel":"Pacific Records"},'
    '{"name":"Winter Primates","recordLabel":""}]},'
    '{"name":"Small Night In","bands":['
    '{"name":"Wild Antelope","recordLabel":"Marner Sis. Recording"},'
    '{"name":"Squint-281","recordLabel":"Outerscope"},'
    '{"name":"Green Mild Cold Capsicum","recordLabel":"Marner Sis. Recording"},'
    '{"name":"Yanke East","recordLabel":"MEDIOCRE Music"},'
    '{"name":"The Black Dashes","recordLabel":"Fourth Woman Records"}]},'
    '{"name":"Trainerella","bands":['
    '{"name":"Wild Antelope","recordLabel":"Still Bottom Records"},'
    '{"name":"YOUKRANE","recordLabel":"Anti Records"},'
    '{"name":"Adrian Venti","recordLabel":"Monocracy Records"},'
    '{"name":"Manish Ditch","recordLabel":"ACR"}]},'
    '{"name":"Twisted Tour","bands":['
    '{"name":"Auditones","recordLabel":"Marner Sis. Recording"},'
    '{"name":"Squint-281"},'
    '{"name":"Summon","recordLabel":"Outerscope"}]},'
    '{"bands":['
    '{"name":"Critter Girls","recordLabel":"ACR"},'
    '{"name":"Propeller","recordLabel":"Pacific Records"}]}]'
)

# Same payload with the first festival's opening broken.
INVALID_FESTIVALS_JSON = "[{," + FESTIVALS_JSON[2:]

EXPECTED_RECORD_LABELS = [
    "",
    "ACR",
    "Anti Records",
    "Fourth Woman Records",
    "MEDIOCRE Music",
    "Marner Sis. Recording",
    "Monocracy Records",
    "Outerscope",
    "Pacific Records",
    "Still Bottom Records",
    "XS Recordings",
]

_BAND = " " * 5
_FESTIVAL = " " * 10

EXPECTED_LISTING_LINES = [
    "",
    _BAND + "Squint-281",
    _FESTIVAL + "Twisted Tour",
    _BAND + "Winter Primates",
    _FESTIVAL + "LOL-palooza",
    "ACR",
    _BAND + "Critter Girls",
    _FESTIVAL,
    _BAND + "Manish Ditch",
    _FESTIVAL + "Trainerella",
    "Anti Records",
    _BAND + "YOUKRANE",
    _FESTIVAL + "Trainerella",
    "Fourth Woman Records",
    _BAND + "Jill Black",
    _FESTIVAL + "LOL-palooza",
    _BAND + "The Black Dashes",
    _FESTIVAL + "Small Night In",
    "MEDIOCRE Music",
    _BAND + "Yanke East",
    _FESTIVAL + "Small Night In",
    "Marner Sis. Recording",
    _BAND + "Auditones",
    _FESTIVAL + "Twisted Tour",
    _BAND + "Green Mild Cold Capsicum",
    _FESTIVAL + "Small Night In",
    _BAND + "Wild Antelope",
    _FESTIVAL + "Small Night In",
    "Monocracy Records",
    _BAND + "Adrian Venti",
    _FESTIVAL + "Trainerella",
    "Outerscope",
    _BAND + "Squint-281",
    _FESTIVAL + "Small Night In",
    _BAND + "Summon",
    _FESTIVAL + "Twisted Tour",
    "Pacific Records",
    _BAND + "Frank Jupiter",
    _FESTIVAL + "LOL-palooza",
    _BAND + "Propeller",
    _FESTIVAL,
    "Still Bottom Records",
    _BAND + "Wild Antelope",
    _FESTIVAL + "Trainerella",
    "XS Recordings",
    _BAND + "Werewolf Weekday",
    _FESTIVAL + "LOL-palooza",
]


@pytest.fixture
def festivals_json() -> str:
    return FESTIVALS_JSON


@pytest.fixture
def sample_festivals() -> list[RawFestival]:
    """The five-festival fixture decoded into RawFestival records."""
    return decode_festivals(FESTIVALS_JSON)


@pytest.fixture
def mock_api_provider(sample_festivals: list[RawFestival]) -> IFestivalAPIProvider:
    """Mock IFestivalAPIProvider returning the five-festival fixture.

    Override with ``mock_api_provider.get_festivals.side_effect = [...]``
    for specific tests.
    """
    mock = MagicMock(spec=IFestivalAPIProvider)
    mock.get_provider_name.return_value = "mock-festivals-api"
    mock.get_festivals = AsyncMock(return_value=sample_festivals)
    return mock
