"""
genhtml Report Parser - Test Suite

Test modules organized by functionality:
- unit/parsing/ - Document, statistics, entries, locator, builder tests
- unit/analysis/ - Report diff tests
- unit/models/ - Pydantic model tests
- unit/ - Config and CLI tests
"""
