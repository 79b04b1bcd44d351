# Copyright 2026 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
This module implements the keys of the timeseries namespace.

Series data key, one per sample:

    key = ['2'][name][timestamp]
          |-1-||-n-||----7----|

Series name key, one per series (the registry):

    key = ['1'][name]
          |-1-||-n-|

The name is written as is, without any escaping or length prefix. Decoding a data key always takes the last
`TIMESTAMP_LENGTH` characters as the timestamp and everything between the discriminant and that tail as the name, the
split never depends on the content of the name.

>>> encode_series_key('cpu.load', 1449308016)
'2cpu.load0000000'
>>> decode_series_key('2cpu.load0000000')
('cpu.load', 1449308016)
>>> encode_series_name('cpu.load')
'1cpu.load'
>>> decode_series_name('1cpu.load')
'cpu.load'

>>> decode_series_key('2000000')
Traceback (most recent call last):
 ...
tskv.exception.InvalidSeriesKey: invalid series key: '2000000'
"""

from tskv.encoding.consts import TIMESTAMP_LENGTH
from tskv.encoding.namespace import KeyNamespace
from tskv.encoding.timestamp import decode_timestamp, encode_timestamp
from tskv.exception import CorruptedData, InvalidSeriesKey, InvalidSeriesName


def encode_series_key(name: str, timestamp: int) -> str:
    """Encode the key of the sample of series `name` at `timestamp`."""
    return KeyNamespace.SERIES_DATA.value + name + encode_timestamp(timestamp)


def decode_series_key(data: str) -> tuple[str, int]:
    """Decode a series data key into its name and timestamp."""
    if len(data) <= TIMESTAMP_LENGTH:
        raise InvalidSeriesKey(f'invalid series key: {data!r}')
    idx = len(data) - TIMESTAMP_LENGTH
    name = data[1:idx]
    try:
        timestamp = decode_timestamp(data[idx:])
    except CorruptedData as e:
        raise CorruptedData.wrap(e) from e
    return name, timestamp


def series_key_prefix(name: str) -> str:
    """The prefix shared by the data keys of series `name`, and of every series whose name starts with `name`."""
    return KeyNamespace.SERIES_DATA.value + name


def encode_series_name(name: str) -> str:
    """Encode the registry key of series `name`."""
    return KeyNamespace.SERIES_NAME.value + name


def decode_series_name(data: str) -> str:
    """Decode a registry key into the series name."""
    if len(data) < 2:
        raise InvalidSeriesName(f'invalid series name: {data!r}')
    return data[1:]
