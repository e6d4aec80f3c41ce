"""Non-transitive dice game with provably fair random rolls."""

__version__ = "1.0.0"
