"""SongVote backend: per-song thumbs up/down ratings for a radio stream page."""

__version__ = "0.1.0"
