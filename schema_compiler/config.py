# Copyright 2026 TIER IV, inc.
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

"""Configuration management for the schema compiler."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging, level_from_name


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class CompilerConfig:
    """Configuration for schema loading and the checker CLI."""
    log_level: str = "INFO"
    print_level: str = "WARNING"
    cache_enabled: bool = True
    check_schema: bool = False

    @classmethod
    def from_env(cls) -> 'CompilerConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('SCHEMA_COMPILER_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('SCHEMA_COMPILER_PRINT_LEVEL', 'WARNING'),
            cache_enabled=_env_flag('SCHEMA_COMPILER_CACHE_ENABLED', 'true'),
            check_schema=_env_flag('SCHEMA_COMPILER_CHECK_SCHEMA', 'false'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging for the ``schema_compiler`` logger tree."""
        level = level_from_name(self.log_level, logging.INFO)
        stderr_level = level_from_name(self.print_level, logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            level=level,
            stderr_level=stderr_level,
            formatter=formatter,
            logger_name='schema_compiler',
        )


# Global configuration instance
compiler_config = CompilerConfig.from_env()
