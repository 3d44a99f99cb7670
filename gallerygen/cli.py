"""
Command Line Interface for the gallery build.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .builder import Builder
from .config import GalleryConfig
from .errors import GalleryError
from .manifest import Manifest
from .reporter import Reporter
from .thumbnail_generator import CROP_POLICIES
from .walk_progress import WalkProgress


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('PIL').setLevel(logging.WARNING)

    return logging.getLogger('gallerygen')


def get_config(args: argparse.Namespace) -> GalleryConfig:
    """Get configuration from environment and CLI overrides."""
    config = GalleryConfig.from_env()

    if getattr(args, 'project_root', None):
        config.project_root = args.project_root
    if getattr(args, 'images_dir', None):
        config.images_dir = args.images_dir
    if getattr(args, 'no_thumbnails', False):
        config.generate_thumbnails = False
    if getattr(args, 'strict', False):
        config.strict = True
    if getattr(args, 'crop_policy', None):
        config.crop_policy = args.crop_policy
    if getattr(args, 'unique_names', False):
        config.unique_thumbnail_names = True

    return config


def cmd_build(args: argparse.Namespace) -> int:
    """Execute build command: scan images, write thumbnails and manifest."""
    logger = setup_logging(args.verbose)

    config = get_config(args)
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    logger.info(f"Project: {config.project_path}")
    logger.info(f"Images: {config.images_path}")
    if config.generate_thumbnails:
        logger.info(f"Thumbnails: {config.thumbnail_path} "
                    f"(1/{config.scale_factor} scale, {config.crop_width}x{config.crop_height} "
                    f"crop, {config.crop_policy})")
    else:
        logger.info("Thumbnails: disabled")
    logger.info(f"Manifest: {config.manifest_path}")

    progress = None
    if not args.quiet:
        progress = WalkProgress(show_files=args.show_files, logger=logger)

    try:
        builder = Builder(config, logger)
        manifest, stats = builder.run(progress=progress)
    except GalleryError as e:
        logger.error(f"Build failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Build failed: {e}")
        return 1

    if not args.quiet:
        print()
        print(f"Images: {manifest.total_images}")
        if config.generate_thumbnails:
            print(f"Thumbnails: {stats.thumbnails_generated}")
            print(f"Errors: {stats.thumbnail_errors}")
        if stats.dropped:
            print(f"Dropped: {stats.dropped}")
        print(f"Time: {stats.elapsed_seconds:.1f}s ({stats.rate_per_second:.1f} images/sec)")
        print(f"Manifest: {config.manifest_path}")

    # Per-image thumbnail failures do not change the exit status
    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Execute report command."""
    logger = setup_logging(args.verbose)
    config = get_config(args)
    manifest_path = args.manifest or config.manifest_path

    try:
        manifest = Manifest.load(manifest_path)
    except FileNotFoundError:
        logger.error(f"Manifest not found: {manifest_path}")
        return 1
    except Exception as e:
        logger.error(f"Failed to load manifest: {e}")
        return 1

    reporter = Reporter()

    if args.type == 'summary':
        reporter.report_summary(manifest, config.project_path)
    elif args.type == 'dangling':
        dangling = reporter.report_dangling(manifest, config.project_path)
        return 1 if dangling else 0

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='gallerygen',
        description='Gallery thumbnail and manifest builder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Running with no command performs a full build with the default layout:
  images from ../images, thumbnails to ../assets/thumbnail,
  manifest to ../data/images.json

Examples:
  python -m gallerygen build --project-root site --show-files
  python -m gallerygen report --project-root site --type dangling

Environment:
  GALLERYGEN_PROJECT_ROOT, GALLERYGEN_IMAGES_DIR (overridden by flags)
"""
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Build command
    build_parser = subparsers.add_parser('build', help='Scan images and write thumbnails and manifest')
    build_parser.add_argument('-p', '--project-root', metavar='PATH',
                              help='Project root (default: ..)')
    build_parser.add_argument('-i', '--images-dir', metavar='PATH',
                              help='Source image tree (default: <project-root>/images)')
    build_parser.add_argument('--no-thumbnails', action='store_true',
                              help='Only build the manifest, without thumbnail fields')
    build_parser.add_argument('--strict', action='store_true',
                              help='Leave images whose thumbnail failed out of the manifest')
    build_parser.add_argument('--crop-policy', choices=CROP_POLICIES,
                              help='What to do when the crop is larger than the resized image '
                                   '(default: clamp)')
    build_parser.add_argument('--unique-names', action='store_true',
                              help='Add a path hash to thumbnail names to avoid collisions')
    build_parser.add_argument('-q', '--quiet', action='store_true', help='Suppress progress output')
    build_parser.add_argument('--show-files', action='store_true',
                              help='Print each file as processed with result')
    build_parser.add_argument('-v', '--verbose', action='store_true', default=argparse.SUPPRESS,
                              help='Enable verbose logging')

    # Report command
    report_parser = subparsers.add_parser('report', help='Generate reports from an existing manifest')
    report_parser.add_argument('-p', '--project-root', metavar='PATH',
                               help='Project root (default: ..)')
    report_parser.add_argument('-m', '--manifest',
                               help='Manifest file (default: <project-root>/data/images.json)')
    report_parser.add_argument('-t', '--type', choices=['summary', 'dangling'],
                               default='summary', help='Report type')
    report_parser.add_argument('-v', '--verbose', action='store_true', default=argparse.SUPPRESS,
                               help='Enable verbose logging')

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    argv = list(sys.argv[1:] if args is None else args)
    parsed_args = parser.parse_args(argv)

    if not parsed_args.command:
        parsed_args = parser.parse_args(argv + ['build'])

    if parsed_args.command == 'build':
        return cmd_build(parsed_args)
    elif parsed_args.command == 'report':
        return cmd_report(parsed_args)

    return 1
