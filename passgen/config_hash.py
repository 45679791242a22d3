"""Policy hash computation for telemetry and audits.

This module provides a shared policy hash used by:
- telemetry.py (password_generated / password_rejected events)
- scripts/distribution_audit.py (CSV audit)

The random source is not part of the hash.
"""
import hashlib
import json

from passgen.logic.models import PasswordOptions


def get_config_hash(options: PasswordOptions) -> str:
    """
    Generate hash of a password policy.

    Returns 16-char hex hash of the canonical policy snapshot.
    """
    policy_snapshot = {
        "output_length": options.output_length,
        "minimum_lowercase": options.minimum_lowercase,
        "minimum_uppercase": options.minimum_uppercase,
        "minimum_numeric": options.minimum_numeric,
        "minimum_special": options.minimum_special,
        "special_characters": options.special_characters,
    }
    canonical = json.dumps(policy_snapshot, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()[:16]
