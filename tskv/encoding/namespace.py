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

from enum import Enum

from tskv.exception import UnknownNamespace


class KeyNamespace(str, Enum):
    """ Discriminant that every encoded key starts with.

    The value of each member is the exact character written at position 0 of the key.

    >>> KeyNamespace.SERIES_DATA.value
    '2'
    >>> namespace_of('1cpu.load')
    <KeyNamespace.SERIES_NAME: '1'>
    """

    SERIES_NAME = '1'
    SERIES_DATA = '2'
    HASH_NAME = '3'
    HASH_KEY = '4'

    def prefix(self) -> str:
        """The scan prefix covering every key of this namespace."""
        return self.value


def namespace_of(key: str) -> KeyNamespace:
    """Read the discriminant of an encoded key, raising `UnknownNamespace` if there is none or it is not known."""
    if not key:
        raise UnknownNamespace('empty key has no namespace')
    try:
        return KeyNamespace(key[0])
    except ValueError as e:
        raise UnknownNamespace(f'unknown key namespace {key[0]!r}', cause=e) from e
