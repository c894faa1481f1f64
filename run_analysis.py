#!/usr/bin/env python3
"""Compute the stylometric fingerprint of a corpus file.

Usage:
    python run_analysis.py corpus.txt
    python run_analysis.py corpus.txt outputs/ --text
    python run_analysis.py corpus.txt --config config.json -v

Engine parameters (MATTR window, n-gram range, qualifier and cap, readability
chunk size) are read from the config file; see config.json.sample.
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from stylometry.config import Config, load_config
from stylometry.errors import StylometryError
from stylometry.pipeline import run_analysis
from stylometry.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract stylometric features from a text corpus."
    )
    parser.add_argument("input_file", help="UTF-8 corpus file")
    parser.add_argument("output_dir", nargs="?", default=None,
                        help="Report directory (default: from config, 'outputs')")
    parser.add_argument("--config", default=None,
                        help="Configuration file (default: config.json if present)")
    parser.add_argument("--text", action="store_true",
                        help="Also write a plain-text summary")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        if args.config:
            config = load_config(args.config)
        elif Path("config.json").exists():
            config = load_config("config.json")
        else:
            config = Config()
    except (FileNotFoundError, StylometryError) as e:
        setup_logging(level="INFO")
        logger.error(str(e))
        return 1

    setup_logging(
        level="DEBUG" if args.verbose else config.log_level,
        json_format=config.log_json,
    )

    try:
        report = run_analysis(
            input_file=args.input_file,
            output_dir=args.output_dir,
            config=config,
            write_text=args.text or None,
        )
    except (FileNotFoundError, UnicodeDecodeError, StylometryError) as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    print(f"Lexical diversity (MATTR): {report.lexical_diversity_as_MATTR}")
    print(f"Reading ease: {report.readability_scores['avgReadabilityScore']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
