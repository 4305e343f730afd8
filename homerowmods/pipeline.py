"""Build a variant's rules and send them to the configured destination."""

from loguru import logger

from homerowmods.core import Config, Rule
from homerowmods.karabiner import (
    build_complex_modifications,
    build_parameters,
    build_rules,
    dump_document,
    write_complex_modification,
    write_to_profile,
)
from homerowmods.variants import get_variant


def _document_title(variant_name: str) -> str:
    return f"Home row mods ({variant_name})"


def run_pipeline(config: Config) -> list[Rule]:
    """Generate rules for config.variant and write them out.

    Destinations, in order of precedence:
    - dry_run: print the profile's complex_modifications block to stdout
    - complex_modification: write an importable asset file
    - otherwise: replace the rules of a profile inside karabiner.json

    Returns:
        The generated rules
    """
    variant = get_variant(config.variant)
    profile_name = config.profile or variant.profile_name
    rules = build_rules(variant, config)
    parameters = build_parameters(config)

    if config.dry_run:
        dump_document(build_complex_modifications(rules, parameters), fmt=config.output_format)
    elif config.complex_modification:
        write_complex_modification(
            config.complex_modification,
            _document_title(variant.name),
            rules,
            config.verbose,
        )
    else:
        write_to_profile(rules, profile_name, config.karabiner_json, parameters, config.verbose)

    logger.debug(f"Pipeline finished with {len(rules)} rules")
    return rules
