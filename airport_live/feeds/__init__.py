"""Live-network feed normalization."""

from airport_live.feeds.normalizer import FeedNormalizer, as_list

__all__ = ['FeedNormalizer', 'as_list']
