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
Constants of the persisted key/value format.

Every key already written to a store depends on these values: changing any of them invalidates existing keys and
needs a migration that bumps `FORMAT_VERSION`. They are deliberately not part of `TskvSettings`.
"""

# Format version 1.
FORMAT_VERSION: int = 1

# Incoming timestamps are stored as the difference to this horizon (seconds).
TIMESTAMP_HORIZON: int = 1449308016

# Timestamps are written as base-36 numerals (digits 0-9 then a-z).
TIMESTAMP_BASE: int = 36
TIMESTAMP_ALPHABET: str = '0123456789abcdefghijklmnopqrstuvwxyz'

# A 7 digit base-36 numeral covers 36**7 seconds, more than 2400 years after the horizon.
TIMESTAMP_LENGTH: int = 7

# Inclusive bounds of the timestamps that fit in the fixed-width field.
MIN_TIMESTAMP: int = TIMESTAMP_HORIZON
MAX_TIMESTAMP: int = TIMESTAMP_HORIZON + TIMESTAMP_BASE ** TIMESTAMP_LENGTH - 1

# Sample values are written as fixed-point decimals with this many fractional digits.
VALUE_DECIMAL_PLACES: int = 3
