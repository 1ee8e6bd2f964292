"""Player search and leaderboard lookup service for aoe4world."""

__version__ = "0.1.0"
