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
from typing import Optional

from pydantic import field_validator

from tskv.log import LoggingOutput
from tskv.utils.pydantic import BaseModel
from tskv.utils.yaml import model_from_extended_yaml


class StorageBackend(str, Enum):
    MEMORY = 'memory'
    ROCKSDB = 'rocksdb'


class TskvSettings(BaseModel):
    """ Runtime settings of the storage layer.

    The persisted key format is not configurable, see `tskv.encoding.consts`.
    """

    # Which KVStorage implementation `create_storage` builds.
    STORAGE_BACKEND: StorageBackend = StorageBackend.MEMORY

    # Directory of the RocksDB database, a temporary directory is used when not set.
    ROCKSDB_PATH: Optional[str] = None

    # Size in bytes of the RocksDB block cache, no cache when not set.
    ROCKSDB_CACHE_CAPACITY: Optional[int] = None

    # Column family that holds every key written by tskv.
    ROCKSDB_COLUMN_FAMILY: str = 'tskv'

    LOG_OUTPUT: LoggingOutput = LoggingOutput.PRETTY
    LOG_DEBUG: bool = False

    @field_validator('ROCKSDB_CACHE_CAPACITY')
    @classmethod
    def _validate_cache_capacity(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError(f'ROCKSDB_CACHE_CAPACITY must be positive, got {value}')
        return value

    @field_validator('ROCKSDB_COLUMN_FAMILY')
    @classmethod
    def _validate_column_family(cls, value: str) -> str:
        if not value or not value.isascii():
            raise ValueError(f'ROCKSDB_COLUMN_FAMILY must be a non-empty ascii string, got {value!r}')
        return value

    @classmethod
    def from_yaml(cls, *, filepath: str) -> 'TskvSettings':
        """Takes a filepath to a yaml file and returns a validated TskvSettings instance."""
        return model_from_extended_yaml(cls, filepath=filepath)
