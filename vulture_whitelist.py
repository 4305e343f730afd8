"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.check_variant  # noqa: F821  # unused method (homerowmods/core/config.py:57)
_.check_positive_threshold  # noqa: F821  # unused method (homerowmods/core/config.py:68)
_.check_max_size  # noqa: F821  # unused method (homerowmods/core/config.py:75)
_.expand_paths  # noqa: F821  # unused method (homerowmods/core/config.py:82)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (homerowmods/core/config.py:86)

# Console script entry point declared in pyproject.toml
main  # unused function (homerowmods/__main__.py:64)
