"""
Command Line Interface for logo generation.
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from .completion_cache import CompletionCache
from .compositor import ResizeCompositor
from .dimension_catalog import DimensionCatalog
from .encoder import Encoder
from .errors import LogoGenError
from .orchestrator import Orchestrator
from .run_config import RunConfig, parse_duration
from .source_loader import SourceLoader


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    
    logging.getLogger('PIL').setLevel(logging.WARNING)
    
    return logging.getLogger('logogen')


def _duration(value: str) -> float:
    try:
        return parse_duration(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser(defaults: Optional[RunConfig] = None) -> argparse.ArgumentParser:
    """Create the argument parser."""
    defaults = defaults or RunConfig()
    
    parser = argparse.ArgumentParser(
        prog='logogen',
        description='Generate padded icon and logo sizes from one 1080x1080 image',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m logogen --input logo.png
  python -m logogen --input logo.png --output icons --config config/dimensions.json
  python -m logogen --input logo.png --timeout 30s --max-workers 4

Outputs already produced for the same input path are skipped; use
--clear-cache to regenerate everything.
"""
    )
    
    parser.add_argument('-i', '--input', required=defaults.input_path is None,
                        default=defaults.input_path, help='Path to the input image')
    parser.add_argument('-o', '--output', default=defaults.output_dir,
                        help=f'Directory to save resized images (default: {defaults.output_dir})')
    parser.add_argument('-c', '--config', default=defaults.config_path,
                        help=f'Path to dimensions config file (default: {defaults.config_path})')
    parser.add_argument('--use-default-dimensions', action='store_true',
                        help='Use the built-in icon set instead of --config')
    parser.add_argument('-t', '--timeout', type=_duration, default=defaults.timeout,
                        help='Stop starting new outputs after this long, e.g. 90s or 2m (default: 2m)')
    parser.add_argument('-w', '--max-workers', type=int, default=defaults.max_workers,
                        help=f'Maximum concurrent workers (default: {defaults.max_workers})')
    parser.add_argument('--cache-dir', default=defaults.cache_root,
                        help=f'Directory for completion markers (default: {defaults.cache_root})')
    parser.add_argument('--clear-cache', action='store_true',
                        help='Forget previously produced outputs for this input first')
    parser.add_argument('--show-files', action='store_true',
                        help='Print one status line per output')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress the summary')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    """Build a RunConfig from parsed arguments."""
    return RunConfig(
        input_path=args.input,
        output_dir=args.output,
        config_path=args.config,
        timeout=args.timeout,
        max_workers=args.max_workers,
        cache_root=args.cache_dir,
    )


def report(orchestrator: Orchestrator, args: argparse.Namespace) -> None:
    """Print per-output lines and the run summary."""
    if args.show_files:
        for outcome in orchestrator.outcomes:
            print(outcome.format_status())
    
    if args.quiet:
        return
    
    stats = orchestrator.stats
    print()
    print(f"Produced: {stats.produced}")
    print(f"Skipped: {stats.skipped}")
    print(f"Failed: {stats.failed}")
    print(f"Time: {stats.elapsed_seconds:.1f}s")
    for detail in stats.error_details:
        print(f"  {detail}")


def run(args: argparse.Namespace) -> int:
    """Execute a generation run."""
    logger = setup_logging(args.verbose)
    config = config_from_args(args)
    
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1
    
    orchestrator = None
    try:
        if args.use_default_dimensions:
            catalog = DimensionCatalog.default()
            logger.info(f"Dimensions: built-in set ({len(catalog)} entries)")
        else:
            catalog = DimensionCatalog.load(config.config_path)
            logger.info(f"Dimensions: {config.config_path} ({len(catalog)} entries)")
        logger.debug(f"Outputs: {', '.join(catalog.names)}")
        
        source = SourceLoader(logger=logger).load(config.input_path)
        logger.info(f"Input: {config.input_path} ({source.format})")
        logger.info(f"Output: {config.output_dir}")
        
        cache = CompletionCache(root=config.cache_root, logger=logger)
        if args.clear_cache:
            cache.clear(cache.derive_path(source.path))
        
        orchestrator = Orchestrator(
            compositor=ResizeCompositor(logger=logger),
            encoder=Encoder(logger=logger),
            cache=cache,
            max_workers=config.max_workers,
            logger=logger,
        )
        
        deadline = time.monotonic() + config.timeout
        orchestrator.process(source, config.output_dir, catalog, deadline=deadline)
        
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except LogoGenError as e:
        logger.error(f"Image processing failed: {e}")
        if orchestrator is not None:
            report(orchestrator, args)
        return 1
    except Exception as e:
        logger.exception(f"Image processing failed: {e}")
        return 1
    
    report(orchestrator, args)
    
    logger.info(f"Image processing complete. Resized images saved to: {config.output_dir}")
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    try:
        defaults = RunConfig.from_env()
    except ValueError as e:
        print(f"logogen: invalid environment configuration: {e}", file=sys.stderr)
        return 2
    
    parser = create_parser(defaults)
    parsed_args = parser.parse_args(args)
    return run(parsed_args)
