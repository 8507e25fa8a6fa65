"""
Admin operations on the Style and Motif catalogs.

Deleting an entry does not touch artist records. The delete result reports
how many artists still reference the ID so the admin can run the repair job.
"""

from typing import Any, Dict, List

import config
from repositories import get_store
from services.tagging import TAG_KINDS
from utils.logging_config import get_logger
from utils.validation import validate_enum, validate_positive_integer, validate_string

logger = get_logger('Catalog')


def _name(value: Any, field: str, required: bool) -> Any:
    if value is None and not required:
        return None
    return validate_string(value, field, max_length=config.CATALOG_NAME_MAX_LENGTH)


def list_entries(kind: str, store=None) -> List[Dict[str, Any]]:
    kind = validate_enum(kind, 'kind', TAG_KINDS)
    store = store or get_store()
    return [entry.to_dict() for entry in store.fetch_catalog(kind)]


def create_entry(kind: str, data: Dict[str, Any], store=None) -> Dict[str, Any]:
    kind = validate_enum(kind, 'kind', TAG_KINDS)
    name_ja = _name(data.get('name_ja', data.get(f'{kind}_name_ja')), 'name_ja', required=True)
    name_en = _name(data.get('name_en', data.get(f'{kind}_name_en')), 'name_en', required=True)
    store = store or get_store()
    entry = store.create_catalog_entry(kind, name_ja, name_en)
    logger.info(f"Created {kind} #{entry.id} {name_ja} / {name_en}")
    return entry.to_dict()


def update_entry(kind: str, data: Dict[str, Any], store=None) -> Dict[str, Any]:
    kind = validate_enum(kind, 'kind', TAG_KINDS)
    entry_id = validate_positive_integer(data.get('id'), 'id')
    name_ja = _name(data.get('name_ja', data.get(f'{kind}_name_ja')), 'name_ja', required=False)
    name_en = _name(data.get('name_en', data.get(f'{kind}_name_en')), 'name_en', required=False)
    store = store or get_store()
    entry = store.update_catalog_entry(kind, entry_id, name_ja=name_ja, name_en=name_en)
    logger.info(f"Updated {kind} #{entry_id}")
    return entry.to_dict()


def delete_entry(kind: str, entry_id: Any, store=None) -> Dict[str, Any]:
    kind = validate_enum(kind, 'kind', TAG_KINDS)
    entry_id = validate_positive_integer(entry_id, 'id')
    store = store or get_store()
    store.delete_catalog_entry(kind, entry_id)

    still_referenced = store.count_artists_referencing(kind, entry_id)
    if still_referenced:
        logger.warning(
            f"Deleted {kind} #{entry_id} is still referenced by {still_referenced} artists; "
            "run the tag repair job to clean them up"
        )
    else:
        logger.info(f"Deleted {kind} #{entry_id}")
    return {'id': entry_id, 'artists_still_referencing': still_referenced}
