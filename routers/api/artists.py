import asyncio

from quart import request
from . import api_blueprint
from services import artist_tag_service
from utils import api_handler
from utils.request_helpers import require_json_body


@api_blueprint.route('/artists/<artist_id>/tags')
@api_handler()
async def artist_tags(artist_id):
    """Effective style names plus per-image styles and motifs."""
    return await asyncio.to_thread(
        artist_tag_service.get_artist_tags, artist_id, request.args.get('lang')
    )


@api_blueprint.route('/artists/<artist_id>/images/styles', methods=['PUT'], defaults={'kind': 'style'})
@api_blueprint.route('/artists/<artist_id>/images/motifs', methods=['PUT'], defaults={'kind': 'motif'})
@api_handler(require_auth=True)
async def set_image_tags(artist_id, kind):
    """Replace one image's tags; body is {image_url, tag_ids}."""
    data = await require_json_body(request)
    return await asyncio.to_thread(artist_tag_service.update_image_tags, artist_id, kind, data)
