"""
Global pytest configuration and fixtures.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from lta_datamall.api.async_client import AsyncLTAClient
from lta_datamall.api.sync_client import LTAClient

TEST_API_KEY = "test_account_key"


@pytest.fixture
def api_key():
    """Provide a test DataMall account key."""
    return TEST_API_KEY


@pytest.fixture
def make_sync_client():
    """
    Provide a factory for LTAClient backed by httpx.MockTransport.

    The factory returns the client and the list of requests it sent.
    """
    clients = []

    def factory(payload=None, status_code=200, content=None, error=None):
        sent = []

        def handler(request):
            sent.append(request)
            if error is not None:
                raise error
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=payload)

        session = httpx.Client(transport=httpx.MockTransport(handler))
        client = LTAClient(TEST_API_KEY, session=session)
        clients.append(session)
        return client, sent

    yield factory

    for session in clients:
        session.close()


@pytest.fixture
def make_async_session():
    """Provide a factory for a mocked aiohttp session returning a fixed body."""

    def factory(payload=None, status=200, body=None, error=None):
        if body is None:
            body = json.dumps(payload).encode("utf-8")

        mock_response = MagicMock()
        mock_response.status = status
        mock_response.read = AsyncMock(return_value=body)

        mock_context_manager = AsyncMock()
        mock_context_manager.__aenter__ = AsyncMock(return_value=mock_response)
        mock_context_manager.__aexit__ = AsyncMock(return_value=None)

        session = MagicMock()
        if error is not None:
            session.get = MagicMock(side_effect=error)
        else:
            session.get = MagicMock(return_value=mock_context_manager)
        return session

    return factory


@pytest.fixture
def make_async_client(make_async_session):
    """Provide a factory for AsyncLTAClient over a mocked session."""

    def factory(payload=None, status=200, body=None, error=None):
        session = make_async_session(payload=payload, status=status, body=body, error=error)
        return AsyncLTAClient(TEST_API_KEY, session=session), session

    return factory


@pytest.fixture
def bus_services_payload():
    """Provide a BusServices response."""
    return {
        "odata.metadata": "http://datamall2.mytransport.sg/ltaodataservice/$metadata#BusServices",
        "value": [
            {
                "ServiceNo": "15",
                "Operator": "GAS",
                "Direction": 1,
                "Category": "TRUNK",
                "OriginCode": "77009",
                "DestinationCode": "77009",
                "AM_Peak_Freq": "7-10",
                "AM_Offpeak_Freq": "8-11",
                "PM_Peak_Freq": "10",
                "PM_Offpeak_Freq": "-",
                "LoopDesc": "Marine Parade Rd",
            }
        ],
    }


@pytest.fixture
def bus_routes_payload():
    """Provide a BusRoutes response."""
    return {
        "value": [
            {
                "ServiceNo": "15",
                "Operator": "GAS",
                "Direction": 1,
                "StopSequence": 12,
                "BusStopCode": "83139",
                "Distance": 4.6,
                "WD_FirstBus": "0532",
                "WD_LastBus": "2337",
                "SAT_FirstBus": "0532",
                "SAT_LastBus": "2337",
                "SUN_FirstBus": "0600",
                "SUN_LastBus": "2337",
            }
        ]
    }


@pytest.fixture
def bus_arrival_payload():
    """Provide a BusArrivalv2 response with one empty NextBus slot."""
    return {
        "odata.metadata": "http://datamall2.mytransport.sg/ltaodataservice/$metadata#BusArrivalv2/@Element",
        "BusStopCode": "83139",
        "Services": [
            {
                "ServiceNo": "15",
                "Operator": "GAS",
                "NextBus": {
                    "OriginCode": "77009",
                    "DestinationCode": "77009",
                    "EstimatedArrival": "2024-03-01T14:46:27+08:00",
                    "Monitored": 1,
                    "Latitude": "1.3154918333333334",
                    "Longitude": "103.90577033333333",
                    "VisitNumber": "1",
                    "Load": "SEA",
                    "Feature": "WAB",
                    "Type": "SD",
                },
                "NextBus2": {
                    "OriginCode": "77009",
                    "DestinationCode": "77009",
                    "EstimatedArrival": "2024-03-01T14:58:02+08:00",
                    "Monitored": 0,
                    "Latitude": "0",
                    "Longitude": "0",
                    "VisitNumber": "1",
                    "Load": "SDA",
                    "Feature": "",
                    "Type": "DD",
                },
                "NextBus3": {
                    "OriginCode": "",
                    "DestinationCode": "",
                    "EstimatedArrival": "",
                    "Monitored": 0,
                    "Latitude": "",
                    "Longitude": "",
                    "VisitNumber": "",
                    "Load": "",
                    "Feature": "",
                    "Type": "",
                },
            }
        ],
    }


@pytest.fixture
def train_alert_payload():
    """Provide a TrainServiceAlerts response during a disruption."""
    return {
        "value": {
            "Status": 2,
            "AffectedSegments": [
                {
                    "Line": "NEL",
                    "Direction": "Punggol",
                    "Stations": "NE1,NE3,NE4,NE5",
                    "FreePublicBus": "NE1,NE3,NE4,NE5",
                    "FreeMRTShuttle": "NE1,NE3",
                    "MRTShuttleDirection": "Punggol",
                }
            ],
            "Message": [
                {
                    "Content": "1710hrs: NEL - Additional travelling time of 20 minutes.",
                    "CreatedDate": "2024-03-01 17:10:00",
                }
            ],
        }
    }
