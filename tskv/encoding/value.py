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
This module implements the encoding of sample values, stored as the store value of a series data key.

Values are written as fixed-point decimals with `VALUE_DECIMAL_PLACES` fractional digits, never in scientific
notation. The format is lossy: decoding an encoded value gives back the value rounded to 3 decimal places.

>>> encode_value(3.14159)
'3.142'
>>> encode_value(2)
'2.000'
>>> encode_value(1e20)
'100000000000000000000.000'
>>> decode_value('3.142')
3.142

>>> decode_value('3,142')
Traceback (most recent call last):
 ...
tskv.exception.CorruptedData: corrupted data: could not convert string to float: '3,142'
"""

from tskv.encoding.consts import VALUE_DECIMAL_PLACES
from tskv.exception import CorruptedData


def encode_value(value: float) -> str:
    """Encode a sample value as a fixed-point decimal string."""
    return f'{value:.{VALUE_DECIMAL_PLACES}f}'


def decode_value(data: str) -> float:
    """ Decode a sample value.

    Anything `float()` rejects is corrupted data, as are strings `float()` would only accept after normalizing them
    (surrounding whitespace, digit group underscores).
    """
    if data != data.strip() or '_' in data:
        raise CorruptedData(f'invalid value string: {data!r}')
    try:
        return float(data)
    except ValueError as e:
        raise CorruptedData.wrap(e) from e
