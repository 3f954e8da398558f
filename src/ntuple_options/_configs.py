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
"""Default values of the ntuple options."""


class OptionsDefaults:
    # ------ write options ------ #
    # general purpose compression: zstd, level 5
    COMPRESSION = 505
    # target size of one compressed cluster
    APPROX_ZIPPED_CLUSTER_SIZE = 50 * 1000 * 1000  # 50MB
    # memory limit of the I/O buffer of one cluster
    MAX_UNZIPPED_CLUSTER_SIZE = 512 * 1024**2  # 512MiB
    # tail page of a cluster is between 1/2 and 3/2 of this size
    APPROX_UNZIPPED_PAGE_SIZE = 64 * 1024  # 64KiB
    USE_BUFFERED_WRITE = True
    HAS_SMALL_CLUSTERS = False

    # A 32bit index column can address 512MiB of 1-bit (on disk size) bools,
    #   which is the worst case for the size of the index column.
    MAX_SMALL_CLUSTER_SIZE = 512 * 1024**2  # 512MiB

    # ------ daos write options ------ #
    DAOS_OBJECT_CLASS = "SX"
    # equivalent of 16 uncompressed pages
    DAOS_MAX_CAGE_SIZE = 16 * APPROX_UNZIPPED_PAGE_SIZE  # 1MiB

    # ------ read options ------ #
    CLUSTER_BUNCH_SIZE = 1

    UINT32_MAX = 2**32 - 1


cfg = OptionsDefaults()
