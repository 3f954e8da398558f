# Copyright 2025 TIER IV, INC. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""User-tunable settings for reading ntuples."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_serializer,
)

from ._configs import cfg

logger = logging.getLogger(__name__)


class ClusterCache(IntEnum):
    OFF = 0
    ON = 1
    DEFAULT = ON


def _cluster_cache_from_any(_in: Any) -> Any:
    # NOTE: yaml loads bare `on`/`off` as bool
    if isinstance(_in, bool):
        return ClusterCache(int(_in))
    if isinstance(_in, str):
        try:
            return ClusterCache[_in.strip().upper()]
        except KeyError:
            raise ValueError(f"invalid cluster cache mode: {_in!r}") from None
    return _in


class ReadOptions(BaseModel):
    """Common user-tunable settings for reading ntuples.

    All page sources need to support the common options.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    cluster_cache: Annotated[
        ClusterCache, BeforeValidator(_cluster_cache_from_any)
    ] = ClusterCache.DEFAULT
    cluster_bunch_size: int = Field(
        default=cfg.CLUSTER_BUNCH_SIZE, ge=0, le=cfg.UINT32_MAX
    )

    @field_serializer("cluster_cache")
    def _serialize_cluster_cache(self, cluster_cache: ClusterCache) -> str:
        return cluster_cache.name.lower()

    def clone(self) -> ReadOptions:
        return self.model_copy(deep=True)

    def finalize(self) -> ReadOptions:
        snapshot = self.clone()
        logger.debug(f"finalized read options: {snapshot!r}")
        return snapshot
