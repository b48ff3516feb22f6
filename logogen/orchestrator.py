"""
Orchestrator - Fans a catalog out across worker threads.
"""

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from .completion_cache import CompletionCache
from .compositor import ResizeCompositor
from .dimension_catalog import DimensionCatalog
from .dimension_spec import DimensionSpec
from .encoder import Encoder
from .errors import ConfigError, FileIOError, LogoGenError, ProcessingTimeoutError, output_error
from .outcome import OutcomeStatus, ProcessingOutcome
from .run_stats import RunStats
from .source_loader import SourceImage


class Orchestrator:
    """
    Produces every catalog entry from one source image.
    
    One task per entry runs on a bounded thread pool. Workers share the
    read-only SourceImage and write to distinct paths, so no locking is
    needed. A deadline is only checked before each task is submitted;
    tasks already running are never interrupted.
    """
    
    DEFAULT_MAX_WORKERS = 8
    
    def __init__(
        self,
        compositor: Optional[ResizeCompositor] = None,
        encoder: Optional[Encoder] = None,
        cache: Optional[CompletionCache] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize orchestrator.
        
        Args:
            compositor: Resize compositor (default: Lanczos compositor)
            encoder: Output encoder (default: JPEG quality 90)
            cache: Completion cache (default: ./cache)
            max_workers: Upper bound on concurrent workers
            logger: Optional logger instance
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        
        self.logger = logger or logging.getLogger(__name__)
        self.compositor = compositor or ResizeCompositor(logger=self.logger)
        self.encoder = encoder or Encoder(logger=self.logger)
        self.cache = cache or CompletionCache(logger=self.logger)
        self.max_workers = max_workers
        self.stats = RunStats()
        self.outcomes: List[ProcessingOutcome] = []
    
    def process(
        self,
        source: SourceImage,
        output_dir: str,
        catalog: DimensionCatalog,
        deadline: Optional[float] = None
    ) -> List[ProcessingOutcome]:
        """
        Produce every entry of ``catalog`` under ``output_dir``.
        
        Args:
            source: Decoded source image
            output_dir: Directory outputs are written to (created if missing)
            catalog: Targets to produce
            deadline: ``time.monotonic()`` instant after which no further
                workers are started
            
        Returns:
            One ProcessingOutcome per catalog entry, in catalog order
            
        Raises:
            ConfigError: If the catalog is empty
            FileIOError: If the output or cache directory cannot be created
            ProcessingTimeoutError: If the deadline passed before every
                worker was started (started workers still finish)
            LogoGenError: The first failed entry, after all workers finish;
                its kind is that of the underlying failure (ResizeError when
                the failure has no logogen kind) and ``name`` is the output
        """
        if catalog.is_empty:
            raise ConfigError('Orchestrator.process', "no dimensions specified for resizing")
        
        try:
            os.makedirs(output_dir, exist_ok=True)
        except OSError as e:
            raise FileIOError('Orchestrator.process', f"failed to create output directory {output_dir}") from e
        
        cache_dir = self.cache.derive_path(source.path)
        self.cache.ensure(cache_dir)
        
        self.stats = RunStats(total=len(catalog))
        self.outcomes = []
        workers = min(len(catalog), self.max_workers)
        self.logger.info(f"Starting generation: {len(catalog)} outputs, {workers} workers")
        
        futures = []
        timed_out = False
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix='logogen') as pool:
            for spec in catalog:
                if deadline is not None and time.monotonic() >= deadline:
                    timed_out = True
                    self.logger.warning(
                        f"Deadline passed; not starting the remaining "
                        f"{len(catalog) - len(futures)} outputs"
                    )
                    break
                futures.append(pool.submit(self._process_spec, source, spec, output_dir, cache_dir))
            
            outcomes = [future.result() for future in futures]
        
        self.outcomes = outcomes
        
        for outcome in outcomes:
            self.stats.record(outcome)
        
        self.logger.info(
            f"Generation complete: {self.stats.produced} produced, "
            f"{self.stats.skipped} skipped, {self.stats.failed} failed "
            f"({self.stats.elapsed_seconds:.1f}s)"
        )
        
        if timed_out:
            raise ProcessingTimeoutError(
                'Orchestrator.process',
                f"processing timed out after starting {len(futures)} of {len(catalog)} outputs"
            )
        
        for outcome in outcomes:
            if not outcome.ok:
                raise outcome.error
        
        return outcomes
    
    def _process_spec(
        self,
        source: SourceImage,
        spec: DimensionSpec,
        output_dir: str,
        cache_dir: str
    ) -> ProcessingOutcome:
        """Produce a single output; never raises."""
        output_path = os.path.join(output_dir, spec.name)
        
        if self.cache.is_marked(cache_dir, spec.name):
            self.logger.info(f"Cached: {spec.name}")
            return ProcessingOutcome(spec=spec, status=OutcomeStatus.SKIPPED, output_path=output_path)
        
        try:
            canvas = self.compositor.composite(source.image, spec.width, spec.height)
            size = self.encoder.save(canvas, output_path)
        except Exception as e:
            error = output_error('Orchestrator.process_spec', spec.name, e)
            self.logger.error(f"Error processing {spec.name}: {e}")
            return ProcessingOutcome(
                spec=spec,
                status=OutcomeStatus.FAILED,
                output_path=output_path,
                error=error,
            )
        
        try:
            self.cache.mark(cache_dir, spec.name)
        except LogoGenError as e:
            self.logger.error(f"Failed to update cache for {spec.name}: {e}")
        
        self.logger.info(f"Processed: {spec.name} ({size} bytes)")
        return ProcessingOutcome(
            spec=spec,
            status=OutcomeStatus.PRODUCED,
            output_path=output_path,
            bytes_written=size,
        )
