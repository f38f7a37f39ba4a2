"""Bounded top-N leaderboard service."""
