# dummygen/cli.py

import argparse
import logging
import sys

from dummygen.config import get_settings
from dummygen.generator import generate_files
from dummygen.prompt import collect_request


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate dummy files of a given extension, size and count. '
                    'Values not passed as options are asked for interactively.')
    parser.add_argument('--ext', help='File extension (e.g. txt, xlsx, png, jpg)')
    parser.add_argument('--size', help='Target size (e.g. 10MB, 512KB, 100)')
    parser.add_argument('--name', help='File name without extension; {n} is replaced by the file number')
    parser.add_argument('--count', type=int, help='Number of files to create')
    parser.add_argument('--width', type=int, help='Image width in px (png/jpg only)')
    parser.add_argument('--height', type=int, help='Image height in px (png/jpg only)')
    parser.add_argument('--output-dir', help='Directory to write into (default: current directory)')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings().with_overrides(output_dir=args.output_dir)
    except Exception as e:
        logging.basicConfig(format="%(asctime)s,%(levelname)s,%(name)s,%(message)s")
        logger.error("CLI,CONFIG,ERROR,%s", e)
        return 1

    # Basic logging setup
    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s,%(levelname)s,%(name)s,%(message)s",
    )

    try:
        request = collect_request(ext=args.ext, size=args.size, name=args.name, count=args.count,
                                  width=args.width, height=args.height)
        logger.debug("CLI,GENERATE,START,ext=%s,bytes=%d,count=%d,output_dir=%s",
                     request.extension, request.size_bytes, request.count, settings.output_dir)
        generate_files(request, settings)
    except KeyboardInterrupt:
        logger.error("CLI,GENERATE,ABORTED")
        return 130
    except Exception as e:
        logger.exception("CLI,GENERATE,ERROR,%s", e)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
