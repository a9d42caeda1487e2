"""
Shared utilities for resume-gen.

Common functionality used across contexts:
- Logger setup
- Environment mode
- Timestamps
- PDF inspection
"""

from resume_gen.utils.environment import is_production
from resume_gen.utils.timestamp import now

__all__ = ["is_production", "now"]
