"""Startup shared by the command-line tools."""

from argparse import ArgumentParser, Namespace

from loguru import logger

from themeshift.core import Config, load_config
from themeshift.utils import add_log_file_handler, setup_logger


def bootstrap(args: Namespace, parser: ArgumentParser, force_verbose: bool = False) -> Config:
    """Load configuration and set up logging for one tool run.

    Raises:
        ValueError: If the configuration is invalid
        OSError: If the config file cannot be read
    """
    config = load_config(args.config, args, parser)
    verbose = config.verbose or force_verbose
    setup_logger(verbose=verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=verbose, debug=config.debug)
    logger.debug(f"Configuration: {config.model_dump(exclude={'scoring'})}")
    return config


def require_target(args: Namespace, what: str) -> str | None:
    """Return the positional target, logging an error when it is missing."""
    if not args.target:
        logger.error(f"✗ No {what} specified")
        logger.error("  Run with --help for usage")
        return None
    return args.target
