"""CVSS engine configuration management with .env file support"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

OUTPUT_FORMATS = ('table', 'json', 'csv')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class CVSSConfig:
    """CVSS engine configuration"""
    log_level: str = "INFO"
    output_format: str = "table"
    stop_on_error: bool = False

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'CVSSConfig':
        """Load configuration from environment variables and .env file"""
        if env_file:
            env_path = Path(env_file)
        else:
            # Look for .env in current directory and up to 3 parent directories
            current_dir = Path.cwd()
            env_path = None

            for path in [current_dir] + list(current_dir.parents)[:3]:
                potential_env = path / ".env"
                if potential_env.exists():
                    env_path = potential_env
                    break

        if env_path and env_path.exists():
            load_dotenv(env_path)
            logging.debug(f"Loaded configuration from {env_path}")
        elif env_file:
            logging.warning(f"Specified .env file not found: {env_file}")

        return cls(
            log_level=os.getenv('CVSS_LOG_LEVEL', 'INFO'),
            output_format=os.getenv('CVSS_OUTPUT_FORMAT', 'table'),
            stop_on_error=_env_flag('CVSS_STOP_ON_ERROR'),
        )

    def validate(self) -> List[str]:
        """Validate configuration and return list of issues"""
        issues = []

        if self.log_level.upper() not in LOG_LEVELS:
            issues.append(f"Unknown log level '{self.log_level}' (expected one of {', '.join(LOG_LEVELS)})")

        if self.output_format not in OUTPUT_FORMATS:
            issues.append(f"Unknown output format '{self.output_format}' (expected one of {', '.join(OUTPUT_FORMATS)})")

        return issues
