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
__title__ = 'floatcmp'
__description__ = 'Almost-equality of IEEE-754 floating point numbers'
__url__ = 'https://github.com/cog-imperial/floatcmp'
__version__ = '0.1.0'
__author__ = 'Francesco Ceccon'
__author_email__ = 'francesco.ceccon14@imperial.ac.uk'
__license__ = 'Apache 2.0'
