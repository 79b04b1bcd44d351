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
This module implements the fixed-width timestamp encoding used inside series data keys.

A timestamp is stored as its difference to `TIMESTAMP_HORIZON`, written as a base-36 numeral and left-padded with
zeros to `TIMESTAMP_LENGTH` characters. Since every encoded timestamp has the same length, comparing two of them as
strings (or as their UTF-8 bytes) gives the same result as comparing the timestamps numerically.

>>> encode_timestamp(1449308016)
'0000000'
>>> encode_timestamp(1449308016 + 35)
'000000z'
>>> encode_timestamp(1449308016 + 36)
'0000010'
>>> decode_timestamp('0000010')
1449308052

>>> encode_timestamp(1449308016 + 36 ** 7)
Traceback (most recent call last):
 ...
ValueError: timestamp 79813472112 is after the last representable timestamp 79813472111

>>> decode_timestamp('000010')
Traceback (most recent call last):
 ...
tskv.exception.InvalidTimeStampString: invalid timestamp string: '000010'

>>> decode_timestamp('00000-1')
Traceback (most recent call last):
 ...
tskv.exception.CorruptedData: invalid timestamp string: '00000-1'
"""

import re

from tskv.encoding.consts import (
    MAX_TIMESTAMP,
    MIN_TIMESTAMP,
    TIMESTAMP_ALPHABET,
    TIMESTAMP_BASE,
    TIMESTAMP_HORIZON,
    TIMESTAMP_LENGTH,
)
from tskv.exception import CorruptedData, InvalidTimeStampString

# `int(s, 36)` alone would also accept signs, underscores, surrounding whitespace and upper case letters.
_TIMESTAMP_RE = re.compile(f'[{TIMESTAMP_ALPHABET}]{{{TIMESTAMP_LENGTH}}}')


def encode_timestamp(timestamp: int) -> str:
    """ Encode a timestamp (seconds) into its fixed-width base-36 form.

    Timestamps outside `[MIN_TIMESTAMP, MAX_TIMESTAMP]` cannot be represented and raise `ValueError`.
    """
    if timestamp < MIN_TIMESTAMP:
        raise ValueError(f'timestamp {timestamp} is before the horizon {TIMESTAMP_HORIZON}')
    if timestamp > MAX_TIMESTAMP:
        raise ValueError(f'timestamp {timestamp} is after the last representable timestamp {MAX_TIMESTAMP}')
    diff = timestamp - TIMESTAMP_HORIZON
    digits = []
    while diff:
        diff, rem = divmod(diff, TIMESTAMP_BASE)
        digits.append(TIMESTAMP_ALPHABET[rem])
    return ''.join(reversed(digits)).rjust(TIMESTAMP_LENGTH, TIMESTAMP_ALPHABET[0])


def decode_timestamp(data: str) -> int:
    """ Decode a fixed-width base-36 timestamp, the exact inverse of `encode_timestamp`.
    """
    if len(data) != TIMESTAMP_LENGTH:
        raise InvalidTimeStampString(f'invalid timestamp string: {data!r}')
    if not _TIMESTAMP_RE.fullmatch(data):
        raise CorruptedData(f'invalid timestamp string: {data!r}')
    return int(data, TIMESTAMP_BASE) + TIMESTAMP_HORIZON
