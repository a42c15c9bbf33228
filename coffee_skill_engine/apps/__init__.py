"""Entry points that expose the skill to its hosts."""
