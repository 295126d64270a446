"""prdiff: merged, line-numbered hunks from pull request patches."""
