"""Raise Hand - winner leaderboard builder for markdown notes.

This package scans a vault of markdown daily notes for ``#raise-hand-winner``
tags, extracts the winners listed under each tag and produces JSON output
(events, leaderboard and metadata) for a static dashboard.
"""

__version__ = "0.1.0"
