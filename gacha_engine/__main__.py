"""
JSON command line: ``python -m gacha_engine '<request json>'``.

Prints the response payload to stdout; errors go to stderr with exit
status 1.
"""
import argparse
import json
import logging
import sys

from gacha_engine.config import EngineConfig
from gacha_engine.engine import run
from gacha_engine.errors import GachaError
from gacha_engine.request import build_response, clamp_simulation_count, parse_request

logger = logging.getLogger("gacha_engine")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def main(argv=None):
    parser = argparse.ArgumentParser(prog="gacha_engine", description="Gacha pull expectation calculator")
    parser.add_argument("request", help="request body as JSON")
    parser.add_argument("--simulations", type=int, default=None, help="Monte Carlo sample count")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible simulations")
    args = parser.parse_args(argv)

    try:
        config = EngineConfig.from_env()
        logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    except ValueError as e:
        # no handler is installed yet; logging falls back to stderr
        logger.error("FATAL: bad configuration: %s", e, exc_info=True)
        return 1

    try:
        request = parse_request(json.loads(args.request))
        result = run(request, clamp_simulation_count(args.simulations, config), seed=args.seed, config=config)
    except (GachaError, json.JSONDecodeError) as e:
        logger.error("FATAL: %s", e, exc_info=True)
        return 1
    print(json.dumps(build_response(request, result)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
