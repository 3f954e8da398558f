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
"""User-tunable settings for storing ntuples.

All page sinks need to support the common options defined by `WriteOptions`.
    Backends that need more tunables subclass `WriteOptions`, each backend
    variant is identified by its `backend` tag.

Setters only validate the assigned value itself. The relationship between
    the size tunables is checked at once by `check`, which is called by
    `finalize` when a write session is opened.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ._common import human_readable_size, parse_size
from ._compression import compression_settings
from ._configs import cfg
from ._errors import InvalidWriteOptionsError

logger = logging.getLogger(__name__)


def _parse_size_field(_in: Any) -> Any:
    # NOTE: bool is int, reject it here instead of taking it as 0 or 1
    if isinstance(_in, (str, bool)):
        return parse_size(_in)
    return _in


SizeT = Annotated[int, BeforeValidator(_parse_size_field), Field(ge=0)]
UInt32 = Annotated[
    int, BeforeValidator(_parse_size_field), Field(ge=0, le=cfg.UINT32_MAX)
]


class WriteOptions(BaseModel):
    """Common user-tunable settings for storing ntuples."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    MAX_SMALL_CLUSTER_SIZE: ClassVar[int] = cfg.MAX_SMALL_CLUSTER_SIZE

    backend: Literal["common"] = "common"

    compression: int = Field(default=cfg.COMPRESSION, ge=0)
    approx_zipped_cluster_size: SizeT = cfg.APPROX_ZIPPED_CLUSTER_SIZE
    """Approximation of the target compressed cluster size."""
    max_unzipped_cluster_size: SizeT = cfg.MAX_UNZIPPED_CLUSTER_SIZE
    """Memory limit for committing a cluster.

    With very high compression ratio, we need a limit on how large the I/O buffer
        can grow during writing.
    """
    approx_unzipped_page_size: SizeT = cfg.APPROX_UNZIPPED_PAGE_SIZE
    """Target uncompressed page size.

    Should be just large enough so that the compression ratio doesn't benefit much
        more from larger pages. The tail page of a cluster is between half and
        1.5 times of this size.
    """
    use_buffered_write: bool = cfg.USE_BUFFERED_WRITE
    has_small_clusters: bool = cfg.HAS_SMALL_CLUSTERS
    """Use 32bit index columns instead of 64bit ones.

    This limits the cluster size to MAX_SMALL_CLUSTER_SIZE, but can result in smaller
        files for data sets with many collections and lz4 or no compression.
    """

    def set_compression(
        self, setting_or_algorithm: int, level: int | None = None
    ) -> None:
        """Set the compression setting.

        Called with one argument, the packed compression setting is set as it.
            Called with <algorithm> and <level>, the setting is composed from them.
        """
        if level is None:
            self.compression = setting_or_algorithm
        else:
            self.compression = compression_settings(setting_or_algorithm, level)

    def clone(self) -> WriteOptions:
        """Return an independent copy with the same type as this instance."""
        return self.model_copy(deep=True)

    def check(self) -> None:
        """Check the relationship between the tunables.

        Raises:
            InvalidWriteOptionsError on invalid combination of tunables.
        """
        zipped_cluster_size = self.approx_zipped_cluster_size
        unzipped_cluster_size = self.max_unzipped_cluster_size
        page_size = self.approx_unzipped_page_size

        if zipped_cluster_size == 0:
            raise InvalidWriteOptionsError("invalid target cluster size: 0")
        if page_size == 0:
            raise InvalidWriteOptionsError("invalid target page size: 0")
        if zipped_cluster_size > unzipped_cluster_size:
            raise InvalidWriteOptionsError(
                "compressed target cluster size must not be larger than "
                f"maximum uncompressed cluster size: {zipped_cluster_size=}, {unzipped_cluster_size=}"
            )
        if page_size > zipped_cluster_size:
            raise InvalidWriteOptionsError(
                "target page size must not be larger than "
                f"compressed target cluster size: {page_size=}, {zipped_cluster_size=}"
            )
        if (
            self.has_small_clusters
            and unzipped_cluster_size > self.MAX_SMALL_CLUSTER_SIZE
        ):
            raise InvalidWriteOptionsError(
                "maximum uncompressed cluster size must not exceed "
                f"{human_readable_size(self.MAX_SMALL_CLUSTER_SIZE)} with small clusters, "
                f"got {human_readable_size(unzipped_cluster_size)}"
            )

    def finalize(self) -> WriteOptions:
        """Check the options and return a snapshot of them for a write session."""
        self.check()
        snapshot = self.clone()
        logger.debug(f"finalized write options: {snapshot!r}")
        return snapshot


class WriteOptionsDaos(WriteOptions):
    """DAOS-specific user-tunable settings for storing ntuples."""

    backend: Literal["daos"] = "daos"  # type: ignore

    object_class: str = Field(default=cfg.DAOS_OBJECT_CLASS, min_length=1)
    """The object class used to generate OIDs that relate to user data.

    Any `OC_xxx` constant defined by DAOS may be used here without the `OC_` prefix.
    """
    max_cage_size: UInt32 = cfg.DAOS_MAX_CAGE_SIZE
    """The upper bound for page concatenation into cages, in bytes.

    Cage size is assumed to be no smaller than the approximate uncompressed
        page size. Set to 0 to disable page concatenation.
    """

    @property
    def caging_enabled(self) -> bool:
        return self.max_cage_size != 0

    def check(self) -> None:
        super().check()
        # NOTE: the backend relies on this, but it is not rejected here.
        if self.caging_enabled and self.max_cage_size < self.approx_unzipped_page_size:
            logger.warning(
                f"max cage size {human_readable_size(self.max_cage_size)} is smaller than "
                f"the page size {human_readable_size(self.approx_unzipped_page_size)}"
            )


AnyWriteOptions = Annotated[
    WriteOptions | WriteOptionsDaos, Field(discriminator="backend")
]
