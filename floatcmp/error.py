# Copyright 2020 Francesco Ceccon
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
"""floatcmp exceptions module."""


class UnsupportedWidthError(TypeError):
    """Floating point type or byte width without a matching integer type."""
    pass


class MixedWidthError(TypeError):
    """Comparison between floating point numbers of different widths."""
    pass
