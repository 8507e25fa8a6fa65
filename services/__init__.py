"""
Services package for InkFinder tag management.

- tagging: pure model and helper functions for style/motif tags
- tag_repair_service: removes references to deleted catalog entries
- legacy_sync_service: keeps the legacy `styles`/`style_ids` fields usable
- catalog_service: admin CRUD on the Style and Motif catalogs
- artist_tag_service: reads and edits one artist's tags

Service modules should be imported directly where needed, e.g.
`from services import tag_repair_service`.
"""

__all__ = [
    'tagging',
    'batch_report',
    'tag_repair_service',
    'legacy_sync_service',
    'catalog_service',
    'artist_tag_service',
]
