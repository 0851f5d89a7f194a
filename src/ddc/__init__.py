"""Console dungeon crawl and blackjack table."""

__version__ = "0.3.0"
