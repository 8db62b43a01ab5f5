# Copyright 2025 TIER IV, inc.
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

"""Configuration for the schematize command line tools."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import DEFAULT_FORMAT, configure_split_stream_logging, level_from_name


ENV_PREFIX = "SCHEMATIZE_"


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


@dataclass
class CheckerConfig:
    """Settings shared by the instance loader and the checker CLI."""
    log_level: str = "WARNING"
    print_level: str = "WARNING"
    cache_enabled: bool = True
    output_format: str = "human"

    @classmethod
    def from_env(cls) -> 'CheckerConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=_env('LOG_LEVEL', 'WARNING'),
            print_level=_env('PRINT_LEVEL', 'WARNING'),
            cache_enabled=_env('CACHE_ENABLED', 'true').lower() == 'true',
            output_format=_env('OUTPUT_FORMAT', 'human'),
        )

    def set_logging(self) -> logging.Logger:
        """Install split-stream root logging at the configured levels."""
        configure_split_stream_logging(
            level=level_from_name(self.log_level, logging.WARNING),
            stderr_level=level_from_name(self.print_level, logging.WARNING),
            formatter=logging.Formatter(DEFAULT_FORMAT),
        )
        return logging.getLogger('schematize')


# Global configuration instance
checker_config = CheckerConfig.from_env()
