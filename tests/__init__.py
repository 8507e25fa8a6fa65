"""
InkFinder Test Suite

Test organization:
- test_models.py, test_aggregator.py, test_index_mutator.py, test_legacy.py:
  pure tag model and helper functions
- test_repair.py, test_legacy_sync_service.py: batch jobs against a fake store
- test_local_store.py, test_supabase_store.py: store backends
- test_catalog_service.py, test_artist_tag_service.py: service layer
- test_api_routes.py, test_decorators.py, test_validation.py: HTTP layer
- test_scripts.py: command-line entry points
- conftest.py: Shared fixtures and test utilities
"""
