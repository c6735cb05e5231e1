import os
from dotenv import load_dotenv

from .utils.logging import get_logger

load_dotenv()

# validate-only: check a transliterated copy, split/return the original text
# propagate: split/return the transliterated text itself
POLICY_VALIDATE_ONLY = "validate-only"
POLICY_PROPAGATE = "propagate"
TRANSLITERATION_POLICIES = (POLICY_VALIDATE_ONLY, POLICY_PROPAGATE)

log = get_logger()


def transliteration_policy() -> str:
    """Policy used by split_header_line when the caller passes none (read per call)."""
    policy = os.getenv("MAILFIELD_TRANSLITERATION_POLICY", POLICY_VALIDATE_ONLY).strip().lower()
    if policy not in TRANSLITERATION_POLICIES:
        log.warning("unknown MAILFIELD_TRANSLITERATION_POLICY %r", policy)
        raise ValueError(f"unknown transliteration policy: {policy}")
    return policy


def metrics_enabled() -> bool:
    return os.getenv("MAILFIELD_METRICS_ENABLED", "true").lower() == "true"
