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
This module implements the keys of the hash-table namespace.

Only the layout is defined here, the content stored under these keys belongs to the hash-table feature:

    hash name key = ['3'][name]
    hash key      = ['4'][key]

>>> encode_hash_name('sessions')
'3sessions'
>>> decode_hash_key(encode_hash_key('user:42'))
'user:42'
"""

from tskv.encoding.namespace import KeyNamespace
from tskv.exception import InvalidHashKey, InvalidHashName


def encode_hash_name(name: str) -> str:
    return KeyNamespace.HASH_NAME.value + name


def decode_hash_name(data: str) -> str:
    if len(data) < 2:
        raise InvalidHashName(f'invalid hash name: {data!r}')
    return data[1:]


def encode_hash_key(key: str) -> str:
    return KeyNamespace.HASH_KEY.value + key


def decode_hash_key(data: str) -> str:
    if len(data) < 2:
        raise InvalidHashKey(f'invalid hash key: {data!r}')
    return data[1:]
