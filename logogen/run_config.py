"""
RunConfig - Settings for a generation run, from the environment and CLI.
"""

import os
import re
from dataclasses import dataclass
from typing import List, Optional


_DURATION_PART = re.compile(r'(\d+(?:\.\d+)?)([hms]?)')
_UNIT_SECONDS = {'h': 3600, 'm': 60, 's': 1, '': 1}


def parse_duration(value: str) -> float:
    """
    Parse a duration such as ``90``, ``90s``, ``2m``, ``1h`` or ``1m30s``.
    
    Returns:
        Duration in seconds
    """
    text = str(value).strip().lower()
    if not text:
        raise ValueError("empty duration")
    
    total = 0.0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if not match:
            raise ValueError(f"invalid duration: {value!r}")
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()
    return total


@dataclass
class RunConfig:
    """
    Run configuration.
    
    Attributes:
        input_path: Source image (required)
        output_dir: Directory outputs are written to
        config_path: Dimension catalog JSON file
        timeout: Seconds after which no further workers are started
        max_workers: Upper bound on concurrent workers
        cache_root: Directory completion markers are kept under
    """
    input_path: Optional[str] = None
    output_dir: str = 'output'
    config_path: str = 'config/dimensions.json'
    timeout: float = 120.0
    max_workers: int = 8
    cache_root: str = 'cache'
    
    @classmethod
    def from_env(cls) -> 'RunConfig':
        """Load defaults from LOGOGEN_* environment variables."""
        config = cls()
        config.input_path = os.environ.get('LOGOGEN_INPUT') or None
        config.output_dir = os.environ.get('LOGOGEN_OUTPUT_DIR', config.output_dir)
        config.config_path = os.environ.get('LOGOGEN_CONFIG', config.config_path)
        config.cache_root = os.environ.get('LOGOGEN_CACHE_DIR', config.cache_root)
        
        timeout = os.environ.get('LOGOGEN_TIMEOUT')
        if timeout:
            config.timeout = parse_duration(timeout)
        max_workers = os.environ.get('LOGOGEN_MAX_WORKERS')
        if max_workers:
            config.max_workers = int(max_workers)
        
        return config
    
    def validate(self) -> List[str]:
        """Return a list of configuration errors (empty if valid)."""
        errors = []
        if not self.input_path:
            errors.append("input image path is required")
        if self.timeout <= 0:
            errors.append(f"timeout must be positive, got {self.timeout}")
        if self.max_workers < 1:
            errors.append(f"max_workers must be at least 1, got {self.max_workers}")
        if not self.output_dir:
            errors.append("output directory must not be empty")
        return errors
