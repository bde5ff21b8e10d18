"""
Component Tests for location resolution and weather refresh

LocationService against the in-memory repository and mock weather client.
"""

import asyncio

import pytest

from core.response import RequestValidationFailed
from microservices.location_service.models import LocationCreateRequest, LocationFilter
from microservices.location_service.protocols import InvalidAddressError, LocationNotFoundError
from microservices.weather_service.protocols import ProviderError

from tests.fixtures import (
    RECEIVER_ADDRESS,
    SENDER_ADDRESS,
    hours_ago,
    make_location,
    make_location_id,
    make_weather,
)


class TestResolveSenderAndReceiver:

    async def test_two_new_addresses_create_two_locations(
        self, location_service, location_repository, mock_weather_client
    ):
        resolved = await location_service.resolve_sender_and_receiver(SENDER_ADDRESS, RECEIVER_ADDRESS)

        assert resolved.sender_location != resolved.receiver_location
        assert len(location_repository.locations) == 2
        mock_weather_client.assert_called("get_coordinates_from_zip_code", times=2)

        sender = location_repository.locations[resolved.sender_location]
        receiver = location_repository.locations[resolved.receiver_location]
        assert (sender.zip_code, sender.country_code, sender.city) == ("80331", "DE", "Munich")
        assert (receiver.zip_code, receiver.country_code, receiver.city) == ("10115", "DE", "Berlin")
        assert sender.weather is None

    async def test_geocoded_coordinates_are_stored(
        self, location_service, location_repository, mock_weather_client
    ):
        mock_weather_client.set_coordinates("80331", "DE", lat=48.137, lon=11.575)

        resolved = await location_service.resolve_sender_and_receiver(SENDER_ADDRESS, RECEIVER_ADDRESS)

        coordinates = location_repository.locations[resolved.sender_location].coordinates
        assert (coordinates.lat, coordinates.lon) == (48.137, 11.575)

    async def test_shared_zip_and_country_reuse_one_location(
        self, location_service, location_repository, mock_weather_client
    ):
        resolved = await location_service.resolve_sender_and_receiver(
            SENDER_ADDRESS, "Other Street 9, 80331 Munich, Germany"
        )

        assert resolved.sender_location == resolved.receiver_location
        assert len(location_repository.locations) == 1
        assert len(location_repository.get_calls("create_location")) == 1
        mock_weather_client.assert_called("get_coordinates_from_zip_code", times=1)

    async def test_existing_location_is_reused_without_geocoding(
        self, location_service, location_repository, mock_weather_client
    ):
        munich = location_repository.add(make_location(zip_code="80331"))
        berlin = location_repository.add(make_location(zip_code="10115", city="Berlin"))

        resolved = await location_service.resolve_sender_and_receiver(SENDER_ADDRESS, RECEIVER_ADDRESS)

        assert resolved.sender_location == munich.location_id
        assert resolved.receiver_location == berlin.location_id
        mock_weather_client.assert_not_called("get_coordinates_from_zip_code")
        assert location_repository.get_calls("create_location") == []

    async def test_concurrent_resolution_of_same_pair_converges(
        self, location_service, location_repository
    ):
        ids = await asyncio.gather(
            location_service.resolve_address(SENDER_ADDRESS),
            location_service.resolve_address("Another 2, 80331 Munich, Germany"),
            location_service.resolve_address(SENDER_ADDRESS),
        )

        assert len(set(ids)) == 1
        assert len(location_repository.locations) == 1

    async def test_invalid_sender_address(self, location_service, location_repository):
        with pytest.raises(InvalidAddressError) as exc_info:
            await location_service.resolve_sender_and_receiver("Street 1, Munich", RECEIVER_ADDRESS)

        assert str(exc_info.value) == "Invalid sender_address"
        assert location_repository.locations == {}

    async def test_invalid_receiver_address_creates_nothing(self, location_service, location_repository):
        with pytest.raises(InvalidAddressError) as exc_info:
            await location_service.resolve_sender_and_receiver(
                SENDER_ADDRESS, "Street 1, 12345 Town, Atlantis"
            )

        assert str(exc_info.value) == "Invalid receiver_address"
        assert exc_info.value.field == "receiver_address"
        assert location_repository.locations == {}

    async def test_geocoding_failure_propagates(self, location_service, location_repository, mock_weather_client):
        mock_weather_client.set_error()

        with pytest.raises(ProviderError):
            await location_service.resolve_sender_and_receiver(SENDER_ADDRESS, RECEIVER_ADDRESS)

        assert location_repository.locations == {}


class TestResolveAddress:

    async def test_resolve_single_address(self, location_service, location_repository):
        location_id = await location_service.resolve_address(RECEIVER_ADDRESS, field="receiver_address")

        assert location_repository.locations[location_id].city == "Berlin"

    async def test_invalid_address_names_the_field(self, location_service):
        with pytest.raises(InvalidAddressError) as exc_info:
            await location_service.resolve_address("nope", field="receiver_address")

        assert str(exc_info.value) == "Invalid receiver_address"


class TestRefreshWeather:

    async def test_refresh_persists_weather_and_bumps_updated_at(
        self, location_service, location_repository, mock_weather_client
    ):
        stale = location_repository.add(make_location(updated_at=hours_ago(3)))
        mock_weather_client.set_weather(make_weather(main="Rain", description="light rain"))

        refreshed = await location_service.refresh_weather(stale)

        assert refreshed.weather.main == "Rain"
        assert refreshed.updated_at > stale.updated_at
        assert location_repository.locations[stale.location_id].weather.main == "Rain"
        call = mock_weather_client.get_calls("get_current_weather")[0]
        assert (call["lat"], call["lon"]) == (stale.coordinates.lat, stale.coordinates.lon)

    async def test_refresh_of_vanished_location(self, location_service):
        with pytest.raises(LocationNotFoundError):
            await location_service.refresh_weather(make_location())


class TestFindLocations:

    async def test_find_location_by_id(self, location_service, location_repository):
        location = location_repository.add(make_location())

        assert await location_service.find_location(location.location_id) == location

    async def test_find_missing_location_returns_none(self, location_service):
        assert await location_service.find_location(make_location_id()) is None

    async def test_find_location_with_malformed_id(self, location_service):
        with pytest.raises(RequestValidationFailed):
            await location_service.find_location("123")

    async def test_default_limit(self, location_service, location_repository):
        for i in range(25):
            location_repository.add(make_location(zip_code=f"{10000 + i}"))

        locations = await location_service.find_locations(LocationFilter())

        assert len(locations) == 20
        assert location_repository.get_calls("list_locations")[0]["limit"] == 20

    async def test_zero_limit_falls_back_to_default(self, location_service, location_repository):
        for i in range(25):
            location_repository.add(make_location(zip_code=f"{10000 + i}"))

        locations = await location_service.find_locations(LocationFilter(limit=0))

        assert len(locations) == 20
        assert location_repository.get_calls("list_locations")[0]["limit"] == 20

    async def test_filters_are_case_insensitive_substrings(self, location_service, location_repository):
        location_repository.add(make_location(zip_code="80331", city="Munich"))
        location_repository.add(make_location(zip_code="10115", city="Berlin"))

        locations = await location_service.find_locations(LocationFilter(city="muN"))

        assert [loc.city for loc in locations] == ["Munich"]

    async def test_skip_and_limit(self, location_service, location_repository):
        for i in range(5):
            location_repository.add(make_location(zip_code=f"{10000 + i}"))

        locations = await location_service.find_locations(LocationFilter(limit=2, skip=3))

        assert [loc.zip_code for loc in locations] == ["10003", "10004"]


class TestCreateLocation:

    def _request(self, **overrides) -> LocationCreateRequest:
        data = {
            "city": "Munich",
            "country": "Germany",
            "countryCode": "DE",
            "zipCode": "80331",
            "coordinates": {"lat": 48.1, "lon": 11.5},
        }
        data.update(overrides)
        return LocationCreateRequest.model_validate(data)

    async def test_create_location(self, location_service, location_repository):
        location = await location_service.create_location(self._request())

        assert location_repository.locations[location.location_id].zip_code == "80331"

    async def test_create_duplicate_returns_existing(self, location_service, location_repository):
        first = await location_service.create_location(self._request())
        second = await location_service.create_location(self._request(city="München"))

        assert second.location_id == first.location_id
        assert len(location_repository.locations) == 1
