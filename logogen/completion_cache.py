"""
CompletionCache - Marker files recording which outputs were produced.

Markers are keyed on the input *path*, not its contents: renaming the
input starts a fresh cache, overwriting it in place does not.
"""

import hashlib
import logging
import os
import shutil
from typing import Optional

from .errors import FileIOError


class CompletionCache:
    """
    Stores one empty ``<name>.cache`` file per produced output under a
    directory derived from the input path.
    """
    
    MARKER_SUFFIX = '.cache'
    
    def __init__(self, root: str = 'cache', logger: Optional[logging.Logger] = None):
        """
        Initialize cache.
        
        Args:
            root: Directory holding one sub-directory per input path
            logger: Optional logger instance
        """
        self.root = root
        self.logger = logger or logging.getLogger(__name__)
    
    def derive_path(self, input_path: str) -> str:
        """Return the cache directory for ``input_path``."""
        digest = hashlib.md5(str(input_path).encode('utf-8')).hexdigest()
        return os.path.join(self.root, digest)
    
    def marker_path(self, cache_dir: str, name: str) -> str:
        return os.path.join(cache_dir, name + self.MARKER_SUFFIX)
    
    def ensure(self, cache_dir: str) -> None:
        """Create ``cache_dir`` if missing."""
        try:
            os.makedirs(cache_dir, exist_ok=True)
        except OSError as e:
            raise FileIOError('CompletionCache.ensure', f"failed to create cache directory {cache_dir}") from e
    
    def is_marked(self, cache_dir: str, name: str) -> bool:
        return os.path.exists(self.marker_path(cache_dir, name))
    
    def mark(self, cache_dir: str, name: str) -> None:
        """
        Record ``name`` as produced. Safe to call more than once.
        
        Raises:
            FileIOError: If the marker cannot be written
        """
        marker = self.marker_path(cache_dir, name)
        try:
            os.makedirs(os.path.dirname(marker), exist_ok=True)
            with open(marker, 'w'):
                pass
        except OSError as e:
            raise FileIOError('CompletionCache.mark', f"failed to write marker for {name}") from e
    
    def clear(self, cache_dir: str) -> bool:
        """
        Remove every marker under ``cache_dir``.
        
        Returns:
            True if a cache directory was removed
        """
        if not os.path.isdir(cache_dir):
            return False
        try:
            shutil.rmtree(cache_dir)
        except OSError as e:
            raise FileIOError('CompletionCache.clear', f"failed to remove {cache_dir}") from e
        self.logger.info(f"Cleared cache: {cache_dir}")
        return True
