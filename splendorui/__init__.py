"""Interface state for a Splendor board game: panels, options, tokens, players, leaderboard and XML printing."""

__version__ = "0.1.0"