from __future__ import annotations

import json
import uuid
from datetime import timedelta

import pytest

from biq_contracts.core.codec import decode, encode
from biq_contracts.core.errors import DecodeError
from biq_contracts.schemas import device_api
from biq_contracts.schemas.device import Device
from biq_contracts.schemas.flags import DeviceFlags, LimitFlags
from biq_contracts.schemas.limit import LimitType
from biq_contracts.schemas.observation import Observation

Interval = device_api.ObsRequest.Interval

TOKEN = uuid.UUID("9a1b2c3d-4e5f-4a6b-8c7d-9e0f1a2b3c4d")


def test_register_and_limits_requests_share_shape() -> None:
    assert device_api.RegisterRequest is device_api.GenericDeviceRequest
    assert device_api.LimitsRequest is device_api.GenericDeviceRequest
    request = decode(device_api.RegisterRequest, '{"deviceId": "abc123"}')
    assert encode(request) == '{"deviceId":"abc123"}'


def test_share_request_with_null_token() -> None:
    request = decode(device_api.ShareRequest, '{"deviceId":"abc123","token":null}')
    assert request.device_id == "abc123"
    assert request.token is None
    assert encode(request) == '{"deviceId":"abc123"}'


def test_share_request_with_token() -> None:
    request = device_api.ShareRequest(device_id="abc123", token=TOKEN)
    assert json.loads(encode(request)) == {"deviceId": "abc123", "token": str(TOKEN)}
    assert decode(device_api.ShareRequest, encode(request)) == request


def test_share_token_must_be_uuid() -> None:
    with pytest.raises(DecodeError) as exc:
        decode(device_api.ShareRequest, '{"deviceId": "abc123", "token": "letmein"}')
    assert "token" in exc.value.errors


def test_issued_share_tokens_are_fresh() -> None:
    first = device_api.ShareTokenResponse.issue()
    second = device_api.ShareTokenResponse.issue()
    assert first.token.version == 4
    assert first.token != second.token
    assert decode(device_api.ShareTokenResponse, encode(first)) == first


def test_share_token_response_requires_token() -> None:
    with pytest.raises(DecodeError):
        decode(device_api.ShareTokenResponse, "{}")


def test_update_request_flags() -> None:
    unchanged = decode(device_api.UpdateRequest, '{"deviceId": "abc123", "name": "Garage"}')
    assert unchanged.device_flags is None

    lock = device_api.UpdateRequest(device_id="abc123", flags=DeviceFlags.LOCKED)
    assert encode(lock) == '{"deviceId":"abc123","flags":1}'
    assert decode(device_api.UpdateRequest, encode(lock)).device_flags.locked


def test_update_limits_deletion_entries() -> None:
    payload = {
        "deviceId": "abc123",
        "limits": [
            {"limitType": 0, "limitValue": 28.0, "limitFlag": 1},
            {"limitType": 6, "limitValueString": "#00ff00"},
            {"limitType": 1},
        ],
    }
    request = decode(device_api.UpdateLimitsRequest, json.dumps(payload))
    assert [limit.limit_type for limit in request.deletions()] == [LimitType.TEMP_LOW]
    assert [limit.limit_type for limit in request.changes()] == [LimitType.TEMP_HIGH, LimitType.COLOUR]
    assert request.limits[0].limit_flag == LimitFlags.OWNER_SHARED
    assert json.loads(encode(request)) == payload


def test_update_limits_requires_list() -> None:
    with pytest.raises(DecodeError) as exc:
        decode(device_api.UpdateLimitsRequest, '{"deviceId": "abc123"}')
    assert "limits" in exc.value.errors


def test_limits_response_is_update_shape() -> None:
    assert device_api.DeviceLimitsResponse is device_api.UpdateLimitsRequest


def _observation() -> Observation:
    return Observation(
        id=7,
        device_id="abc123",
        obstime=1609459200000.0,
        charging=0,
        firmware="1.4.2",
        battery=3.7,
        temp=19.5,
        light=10,
        humidity=55,
        accelx=0,
        accely=0,
        accelz=0,
    )


def test_list_devices_item_round_trip() -> None:
    item = device_api.ListDevicesResponseItem(
        device=Device(id="abc123", name="Cellar", flags=DeviceFlags.TEMPERATURE_CAPABLE),
        last_observation=_observation(),
        share_count=2,
        limits=[device_api.DeviceLimit(limit_type=LimitType.TEMP_SCALE, limit_value=1)],
    )
    wire = json.loads(encode(item))
    assert wire["shareCount"] == 2
    assert wire["lastObservation"]["bixid"] == "abc123"
    assert wire["limits"] == [{"limitType": 5, "limitValue": 1.0}]

    decoded = decode(device_api.ListDevicesResponseItem, encode(item))
    assert decoded.model_dump() == item.model_dump()


def test_list_devices_item_for_silent_device() -> None:
    item = decode(
        device_api.ListDevicesResponseItem,
        '{"device": {"id": "abc123", "name": "New"}, "shareCount": 0, "limits": []}',
    )
    assert item.last_observation is None
    assert "lastObservation" not in json.loads(encode(item))


def test_negative_share_count_is_passed_through() -> None:
    item = decode(
        device_api.ListDevicesResponseItem,
        '{"device": {"id": "abc123", "name": "New"}, "shareCount": -3}',
    )
    assert item.share_count == -3


def test_interval_ranks_are_stable() -> None:
    assert [interval.value for interval in Interval] == [0, 1, 2, 3, 4]
    assert Interval.ALL < Interval.LIVE < Interval.DAY < Interval.MONTH < Interval.YEAR


def test_interval_granularity() -> None:
    assert Interval.ALL.window is None
    assert Interval.LIVE.window == timedelta(hours=12)
    assert Interval.LIVE.bucket is None
    assert Interval.DAY.window == timedelta(hours=24)
    assert Interval.DAY.bucket is device_api.AggregationBucket.HOUR
    assert Interval.MONTH.window == timedelta(days=30)
    assert Interval.MONTH.bucket is device_api.AggregationBucket.DAY
    assert Interval.YEAR.window == timedelta(days=365)
    assert Interval.YEAR.bucket is device_api.AggregationBucket.MONTH


def test_obs_request_encodes_rank() -> None:
    request = device_api.ObsRequest(device_id="abc123", interval=Interval.DAY)
    assert json.loads(encode(request)) == {"deviceId": "abc123", "interval": 2}
    assert decode(device_api.ObsRequest, encode(request)).requested_interval is Interval.DAY


def test_obs_request_unknown_rank_is_kept() -> None:
    request = decode(device_api.ObsRequest, '{"deviceId": "abc123", "interval": 9}')
    assert request.requested_interval is None
    assert json.loads(encode(request))["interval"] == 9
