"""wifi-log-cleanse — turn raw AP controller syslog into normalized session events."""

import logging
import sys
from argparse import ArgumentParser

from wifilog.classifier import LineClassifier
from wifilog.config import LOG_LEVELS, load_config, load_yaml_config
from wifilog.patterns import build_patterns
from wifilog.pipeline import cleanse_lines
from wifilog.reader import expand_paths, read_multiple
from wifilog.stats import CleanseStats, format_stats_json, format_stats_text

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="wifi-log-cleanse",
        description="Extract session events from raw AP controller syslog files.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="Log file path(s), glob pattern(s), or '-' for stdin",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--output", "-o",
        help="Write records to this file instead of stdout",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print cleansing statistics to stderr when done",
    )
    parser.add_argument(
        "--stats-format",
        choices=["text", "json"],
        default="text",
        help="Statistics format (default: text)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: INFO)",
    )
    return parser


def run(args) -> int:
    """Cleanse the requested files. Returns the process exit code."""
    try:
        config = load_config(args, load_yaml_config(args.config))
        classifier = LineClassifier(build_patterns(config.ip_prefixes))
        paths = expand_paths(args.files)
    except (ValueError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1

    logging.getLogger().setLevel(config.log_level)
    logger.info("Cleansing %d input(s), permitted IP prefixes: %s",
                len(paths), ", ".join(config.ip_prefixes))

    stats = CleanseStats()
    lines = (line for line, _ in read_multiple(paths))

    try:
        out = open(config.output_path, "w", encoding="utf-8") if config.output_path else sys.stdout
    except OSError as e:
        logger.error("Cannot open output %s: %s", config.output_path, e)
        return 1

    try:
        for record in cleanse_lines(lines, classifier, stats):
            out.write(record)
    finally:
        if out is not sys.stdout:
            out.close()

    logger.info("Done: %d lines read, %d records emitted", stats.total_lines, stats.emitted)

    if args.stats:
        if args.stats_format == "json":
            print(format_stats_json(stats), file=sys.stderr)
        else:
            print(format_stats_text(stats), file=sys.stderr)
    return 0


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [CLEANSE] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
