"""Entry point for the analysis runner: ``python -m lti analyze --config <file>``."""

import argparse
import logging
import sys

log = logging.getLogger(__name__)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)

    if not argv:
        logging.basicConfig(level=logging.INFO)
        log.error("Usage: python -m lti <command> [args...]")
        log.error("Available commands:")
        log.error("  analyze   - Run a YAML-configured signal analysis")
        sys.exit(1)

    command = argv[0]

    if command == "analyze":
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s  %(levelname)-8s  %(message)s",
            datefmt="%H:%M:%S",
        )
        p = argparse.ArgumentParser(
            prog="lti analyze",
            description="Decompose, convolve and transform a signal described by a YAML config",
        )
        p.add_argument("--config", required=True, help="Path to YAML config file")
        args = p.parse_args(argv[1:])
        from lti.engine.runner import run_analysis
        run_id = run_analysis(args.config)
        log.info("Finished — run_id: %s", run_id)
    else:
        logging.basicConfig(level=logging.INFO)
        log.error("Unknown command: %s", command)
        sys.exit(1)


if __name__ == "__main__":
    main()
