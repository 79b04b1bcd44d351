import random

import pytest

from tskv.encoding import decode_timestamp, encode_timestamp
from tskv.encoding.consts import MAX_TIMESTAMP, MIN_TIMESTAMP, TIMESTAMP_HORIZON, TIMESTAMP_LENGTH
from tskv.exception import CorruptedData, InvalidTimeStampString


def _sample_timestamps(count: int = 500) -> list[int]:
    rng = random.Random(1449308016)
    edges = [MIN_TIMESTAMP, MIN_TIMESTAMP + 1, MIN_TIMESTAMP + 35, MIN_TIMESTAMP + 36, MAX_TIMESTAMP - 1, MAX_TIMESTAMP]
    return edges + [rng.randint(MIN_TIMESTAMP, MAX_TIMESTAMP) for _ in range(count)]


def test_window_bounds() -> None:
    assert MIN_TIMESTAMP == 1449308016
    assert MAX_TIMESTAMP == 1449308016 + 36 ** 7 - 1
    # more than 100 years of seconds after the horizon
    assert MAX_TIMESTAMP - TIMESTAMP_HORIZON > 100 * 366 * 24 * 3600


def test_encode_at_horizon() -> None:
    assert encode_timestamp(TIMESTAMP_HORIZON) == '0000000'
    assert decode_timestamp('0000000') == TIMESTAMP_HORIZON


def test_encode_last_representable() -> None:
    assert encode_timestamp(MAX_TIMESTAMP) == 'zzzzzzz'
    assert decode_timestamp('zzzzzzz') == MAX_TIMESTAMP


def test_encode_known_values() -> None:
    assert encode_timestamp(TIMESTAMP_HORIZON + 1) == '0000001'
    assert encode_timestamp(TIMESTAMP_HORIZON + 10) == '000000a'
    assert encode_timestamp(TIMESTAMP_HORIZON + 36 ** 2) == '0000100'
    assert encode_timestamp(TIMESTAMP_HORIZON + 36 ** 6) == '1000000'


def test_round_trip_and_fixed_width() -> None:
    for timestamp in _sample_timestamps():
        encoded = encode_timestamp(timestamp)
        assert len(encoded) == TIMESTAMP_LENGTH
        assert decode_timestamp(encoded) == timestamp


def test_order_preserved() -> None:
    timestamps = sorted(set(_sample_timestamps()))
    encoded = [encode_timestamp(t) for t in timestamps]
    assert encoded == sorted(encoded)
    # also under bytewise comparison, which is what the store uses
    assert [e.encode() for e in encoded] == sorted(e.encode() for e in encoded)


@pytest.mark.parametrize('timestamp', [0, TIMESTAMP_HORIZON - 1, MAX_TIMESTAMP + 1, 2 ** 64 - 1])
def test_encode_outside_window(timestamp: int) -> None:
    with pytest.raises(ValueError):
        encode_timestamp(timestamp)


@pytest.mark.parametrize('data', ['', 'toolong12', '000000', '00000000'])
def test_decode_wrong_length(data: str) -> None:
    with pytest.raises(InvalidTimeStampString):
        decode_timestamp(data)


@pytest.mark.parametrize('data', ['!!!!!!!', '000000A', '+000001', '-000001', ' 000001', '00_0001', '000000é'])
def test_decode_outside_alphabet(data: str) -> None:
    with pytest.raises(CorruptedData) as exc_info:
        decode_timestamp(data)
    assert not isinstance(exc_info.value, InvalidTimeStampString)


def test_length_error_is_corrupted_data() -> None:
    with pytest.raises(CorruptedData):
        decode_timestamp('toolong12')
