"""Coffee machine tally skill backend."""

COFFEE_SKILL_VERSION = "1.0.0"

__all__ = ["COFFEE_SKILL_VERSION"]
