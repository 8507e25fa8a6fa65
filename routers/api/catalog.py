import asyncio

from quart import request
from . import api_blueprint
from services import catalog_service
from utils import api_handler
from utils.request_helpers import require_json_body


@api_blueprint.route('/styles', defaults={'kind': 'style'})
@api_blueprint.route('/motifs', defaults={'kind': 'motif'})
@api_handler()
async def list_catalog(kind):
    """List all entries of a catalog, ordered by id."""
    entries = await asyncio.to_thread(catalog_service.list_entries, kind)
    return {'kind': kind, 'entries': entries, 'total': len(entries)}


@api_blueprint.route('/styles', methods=['POST'], defaults={'kind': 'style'})
@api_blueprint.route('/motifs', methods=['POST'], defaults={'kind': 'motif'})
@api_handler(require_auth=True)
async def create_catalog_entry(kind):
    """Create an entry from {name_ja, name_en}."""
    data = await require_json_body(request)
    entry = await asyncio.to_thread(catalog_service.create_entry, kind, data)
    return {'entry': entry}


@api_blueprint.route('/styles', methods=['PUT'], defaults={'kind': 'style'})
@api_blueprint.route('/motifs', methods=['PUT'], defaults={'kind': 'motif'})
@api_handler(require_auth=True)
async def update_catalog_entry(kind):
    """Rename an entry; body is {id, name_ja?, name_en?}."""
    data = await require_json_body(request)
    entry = await asyncio.to_thread(catalog_service.update_entry, kind, data)
    return {'entry': entry}


@api_blueprint.route('/styles', methods=['DELETE'], defaults={'kind': 'style'})
@api_blueprint.route('/motifs', methods=['DELETE'], defaults={'kind': 'motif'})
@api_handler(require_auth=True)
async def delete_catalog_entry(kind):
    """Delete an entry by ?id=N. Artist references are not touched."""
    result = await asyncio.to_thread(catalog_service.delete_entry, kind, request.args.get('id'))
    return result
