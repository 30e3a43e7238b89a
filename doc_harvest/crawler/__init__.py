"""Crawler sub-package: URL scope, fetching, link extraction and crawl sessions."""
