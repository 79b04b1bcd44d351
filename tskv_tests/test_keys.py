import itertools

import pytest

from tskv.encoding import (
    HashEntryKey,
    HashNameKey,
    KeyNamespace,
    SeriesDataKey,
    SeriesNameKey,
    decode_hash_key,
    decode_hash_name,
    decode_key,
    decode_series_key,
    decode_series_name,
    encode_hash_key,
    encode_hash_name,
    encode_key,
    encode_series_key,
    encode_series_name,
    namespace_of,
    series_key_prefix,
)
from tskv.encoding.consts import MAX_TIMESTAMP, TIMESTAMP_HORIZON
from tskv.exception import (
    CorruptedData,
    InvalidHashKey,
    InvalidHashName,
    InvalidSeriesKey,
    InvalidSeriesName,
    InvalidTimeStampString,
    UnknownNamespace,
)

NAMES = ['cpu.load', 'a', 'mem', 'disk/sda1:io', 'with space', 'ünïcode', '0000000', 'cpu.load0000001']
TIMESTAMPS = [TIMESTAMP_HORIZON, TIMESTAMP_HORIZON + 1, 1700000000, MAX_TIMESTAMP]


def test_series_key_at_horizon() -> None:
    key = encode_series_key('cpu.load', 1449308016)
    assert key == '2cpu.load0000000'
    assert decode_series_key(key) == ('cpu.load', 1449308016)


@pytest.mark.parametrize(['name', 'timestamp'], list(itertools.product(NAMES, TIMESTAMPS)))
def test_series_key_round_trip(name: str, timestamp: int) -> None:
    key = encode_series_key(name, timestamp)
    assert key[0] == '2'
    assert key.startswith(series_key_prefix(name))
    assert decode_series_key(key) == (name, timestamp)


def test_series_key_split_is_by_length() -> None:
    # a name that looks like a timestamp is still taken as a name
    assert decode_series_key('20000000' + '0000001') == ('0000000', TIMESTAMP_HORIZON + 1)
    # the shortest valid key has an empty name
    assert decode_series_key('20000001') == ('', TIMESTAMP_HORIZON + 1)


def test_series_keys_sort_by_timestamp() -> None:
    timestamps = [TIMESTAMP_HORIZON + 36 ** i for i in range(7)] + [TIMESTAMP_HORIZON, 1700000000, MAX_TIMESTAMP]
    keys = [encode_series_key('cpu.load', t) for t in sorted(timestamps)]
    assert keys == sorted(keys)


@pytest.mark.parametrize('data', ['', '2', '2000000', 'x' * 7])
def test_series_key_too_short(data: str) -> None:
    with pytest.raises(InvalidSeriesKey):
        decode_series_key(data)


def test_series_key_bad_timestamp_is_wrapped() -> None:
    with pytest.raises(CorruptedData) as exc_info:
        decode_series_key('2cpu.load!!!!!!!')
    assert not isinstance(exc_info.value, InvalidSeriesKey)
    assert isinstance(exc_info.value.cause, CorruptedData)
    assert exc_info.value.__cause__ is exc_info.value.cause


def test_series_key_upper_case_timestamp() -> None:
    with pytest.raises(CorruptedData):
        decode_series_key('2cpu.load000000A')


@pytest.mark.parametrize('name', NAMES)
def test_series_name_round_trip(name: str) -> None:
    key = encode_series_name(name)
    assert key == '1' + name
    assert decode_series_name(key) == name


@pytest.mark.parametrize('data', ['', '1', 'x'])
def test_series_name_too_short(data: str) -> None:
    with pytest.raises(InvalidSeriesName):
        decode_series_name(data)


@pytest.mark.parametrize('name', NAMES)
def test_hash_round_trip(name: str) -> None:
    assert encode_hash_name(name) == '3' + name
    assert decode_hash_name(encode_hash_name(name)) == name
    assert encode_hash_key(name) == '4' + name
    assert decode_hash_key(encode_hash_key(name)) == name


def test_hash_too_short() -> None:
    with pytest.raises(InvalidHashName):
        decode_hash_name('3')
    with pytest.raises(InvalidHashKey):
        decode_hash_key('')


def test_errors_share_one_classification() -> None:
    for error_class in [InvalidTimeStampString, InvalidSeriesKey, InvalidSeriesName, InvalidHashName, InvalidHashKey,
                        UnknownNamespace]:
        assert issubclass(error_class, CorruptedData)
        assert error_class.__doc__ and error_class.__doc__.startswith('Raised when')


def test_namespace_discriminants() -> None:
    assert [ns.value for ns in KeyNamespace] == ['1', '2', '3', '4']
    assert namespace_of('1cpu') is KeyNamespace.SERIES_NAME
    assert namespace_of('2cpu0000000') is KeyNamespace.SERIES_DATA
    assert namespace_of('3h') is KeyNamespace.HASH_NAME
    assert namespace_of('4k') is KeyNamespace.HASH_KEY


@pytest.mark.parametrize('data', ['', '0abc', '5abc', 'abc'])
def test_unknown_namespace(data: str) -> None:
    with pytest.raises(UnknownNamespace):
        namespace_of(data)
    with pytest.raises(UnknownNamespace):
        decode_key(data)


@pytest.mark.parametrize('key', [
    SeriesNameKey('cpu.load'),
    SeriesDataKey('cpu.load', 1700000000),
    HashNameKey('sessions'),
    HashEntryKey('user:42'),
])
def test_key_dispatch_round_trip(key) -> None:
    encoded = encode_key(key)
    assert namespace_of(encoded) is key.namespace
    assert decode_key(encoded) == key
    assert type(decode_key(encoded)) is type(key)


def test_key_dispatch_matches_direct_codecs() -> None:
    assert encode_key(SeriesNameKey('cpu')) == encode_series_name('cpu')
    assert encode_key(SeriesDataKey('cpu', 1700000000)) == encode_series_key('cpu', 1700000000)
    assert encode_key(HashNameKey('h')) == encode_hash_name('h')
    assert encode_key(HashEntryKey('k')) == encode_hash_key('k')


def test_decode_key_propagates_corruption() -> None:
    with pytest.raises(InvalidSeriesKey):
        decode_key('2abc')
    with pytest.raises(InvalidSeriesName):
        decode_key('1')


def test_namespaces_are_disjoint() -> None:
    encoded: dict[str, object] = {}
    for name in NAMES:
        for key in [SeriesNameKey(name), HashNameKey(name), HashEntryKey(name)]:
            encoded[encode_key(key)] = key
        for timestamp in TIMESTAMPS:
            key = SeriesDataKey(name, timestamp)
            encoded[encode_key(key)] = key
    # no two different entities produced the same key
    assert len(encoded) == len(NAMES) * (3 + len(TIMESTAMPS))
    for data, key in encoded.items():
        assert decode_key(data) == key
