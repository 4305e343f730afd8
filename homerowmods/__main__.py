"""Main entry point for homerowmods package."""

from loguru import logger

from homerowmods.cli import create_parser
from homerowmods.core import load_config
from homerowmods.pipeline import run_pipeline
from homerowmods.utils.logging import setup_logger
from homerowmods.variants import get_variant


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("homerowmods - Karabiner home row mods generator")
        logger.info("=" * 60)
        logger.info("")


def _print_config_summary(config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Variant: {config.variant}")
        if config.mode:
            logger.info(f"  Mode override: {config.mode.value}")
        if config.max_size is not None:
            logger.info(f"  Max size override: {config.max_size}")
        if config.dry_run:
            logger.info(f"  Output: stdout ({config.output_format})")
        elif config.complex_modification:
            logger.info(f"  Output: {config.complex_modification}")
        else:
            logger.info(f"  Output: {config.karabiner_json}")
            if config.profile:
                logger.info(f"  Profile: {config.profile}")
        logger.info(f"  Held threshold: {config.held_threshold_ms}ms")
        logger.info(f"  Simultaneous threshold: {config.simultaneous_threshold_ms}ms")
        logger.info("")


def _describe_target(config) -> str:
    """Where this run sends its rules, for log messages."""
    if config.dry_run:
        return f"stdout ({config.output_format})"
    if config.complex_modification:
        return config.complex_modification
    profile = config.profile or get_variant(config.variant).profile_name
    return f"profile '{profile}' in {config.karabiner_json}"


def _run_pipeline_with_error_handling(config) -> None:
    """Run pipeline with proper error handling."""
    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Rules generated successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error(
                f"✗ Generating '{config.variant}' rules for {_describe_target(config)} failed"
            )
            logger.error("=" * 60)
        raise


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    _print_startup_banner(config.verbose)
    _print_config_summary(config)

    _run_pipeline_with_error_handling(config)


if __name__ == "__main__":
    main()
