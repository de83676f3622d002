"""
signfolio Test Suite.

- unit/: normalizer, query builder, Notion client, portfolio service,
  sitemap, settings, and API endpoint tests
- conftest.py: Shared fixtures and raw Notion page builders

Run tests with: pytest
"""
