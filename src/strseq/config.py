"""Configuration utilities for strseq.

This module centralizes small helpers and constants related to application configuration.
"""

import os

COERCION_POLICY_ENV = "STRSEQ_COERCION_POLICY"  # pragma: no mutate
DEFAULT_COERCION_POLICY = "lenient"  # pragma: no mutate


def get_coercion_policy_name() -> str:
    """Get the coercion policy name from the environment.

    Used as the default of the CLI's ``--coercion`` option; the name is
    validated there.

    Returns:
        The value of `STRSEQ_COERCION_POLICY`, or ``"lenient"`` when it is
        unset or empty.
    """
    if not (name := os.environ.get(COERCION_POLICY_ENV, "").strip()):
        return DEFAULT_COERCION_POLICY
    return name
