import asyncio

import config
from quart import request
from . import api_blueprint
from services import legacy_sync_service, tag_repair_service
from services.tagging import TAG_KINDS
from utils import api_handler
from utils.request_helpers import optional_json_body, parse_bool
from utils.validation import validate_enum


@api_blueprint.route('/system/repair-tags', methods=['POST'])
@api_handler(require_auth=True)
async def repair_tags():
    """Remove tag IDs that no longer exist in the catalog. Dry run by default."""
    data = await optional_json_body(request)
    kind = validate_enum(data.get('kind', 'style'), 'kind', TAG_KINDS)
    report = await asyncio.to_thread(
        tag_repair_service.run_tag_repair,
        kind=kind,
        dry_run=parse_bool(data.get('dry_run'), default=True),
        prune_empty=parse_bool(data.get('prune_empty')),
    )
    return report.to_dict()


@api_blueprint.route('/system/backfill-style-ids', methods=['POST'])
@api_handler(require_auth=True)
async def backfill_style_ids():
    """Fill empty style_ids from legacy style names. Dry run by default."""
    data = await optional_json_body(request)
    report = await asyncio.to_thread(
        legacy_sync_service.backfill_style_ids,
        dry_run=parse_bool(data.get('dry_run'), default=True),
    )
    return report.to_dict()


@api_blueprint.route('/system/resync-styles', methods=['POST'])
@api_handler(require_auth=True)
async def resync_styles():
    """Recompute legacy style names from the per-image index. Dry run by default."""
    data = await optional_json_body(request)
    language = validate_enum(data.get('lang') or config.DEFAULT_LANGUAGE, 'lang',
                             config.SUPPORTED_LANGUAGES)
    report = await asyncio.to_thread(
        legacy_sync_service.resync_legacy_styles,
        language=language,
        dry_run=parse_bool(data.get('dry_run'), default=True),
    )
    return report.to_dict()
