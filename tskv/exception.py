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

from typing import Optional


class TskvError(Exception):
    """Base class for exceptions in tskv."""
    pass


class CorruptedData(TskvError):
    """Raised when bytes read from the store do not have the expected shape.

    This is the single classification for every decoding failure: callers must treat the record as corrupt and report
    it, never skip or coerce it. When the failure comes from a lower-level parser, that error is kept in `cause` (and
    is also chained as `__cause__` by the code that raises it).
    """

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause

    @classmethod
    def wrap(cls, cause: BaseException) -> 'CorruptedData':
        """Build a corruption error around a lower-level failure, keeping its message."""
        return cls(f'corrupted data: {cause}', cause=cause)


class InvalidTimeStampString(CorruptedData):
    """Raised when an encoded timestamp does not have the fixed width."""
    pass


class InvalidSeriesKey(CorruptedData):
    """Raised when a series data key is too short to hold a name and a timestamp."""
    pass


class InvalidSeriesName(CorruptedData):
    """Raised when a series name key has no content after the discriminant."""
    pass


class InvalidHashName(CorruptedData):
    """Raised when a hash name key has no content after the discriminant."""
    pass


class InvalidHashKey(CorruptedData):
    """Raised when a hash key has no content after the discriminant."""
    pass


class UnknownNamespace(CorruptedData):
    """Raised when a key is empty or starts with a byte that is not a known discriminant."""
    pass
