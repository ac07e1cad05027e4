import argparse
import logging
import sys

from weather_station.config import load_config
from weather_station.demo import run_demo
from weather_station.utils.exceptions import ConfigError


def parse_args(argv=None):
    example_usage = """
    Example usage:

    Run with the built-in readings:
    $ python -m weather_station.scripts.run_demo

    Use a configuration file:
    $ python -m weather_station.scripts.run_demo --config ./configs/demo.yaml

    Show debug output:
    $ python -m weather_station.scripts.run_demo -c ./configs/demo.yaml -l DEBUG
    """
    parser = argparse.ArgumentParser(
        description="Push weather readings to display observers.",
        epilog=example_usage,
        formatter_class=argparse.RawDescriptionHelpFormatter)

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to the demo configuration file (demo.yaml). Built-in defaults are used if omitted.",
    )
    parser.add_argument(
        "--log_level",
        "-l",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level. Overrides logging.level from the configuration file.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    level = args.log_level if args.log_level else config["logging"]["level"]
    logging.basicConfig(level=level.upper(), format=config["logging"]["format"])

    run_demo(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
