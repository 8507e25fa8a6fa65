"""
Tests for the HTTP API, run against the in-memory store
"""
import pytest

from tests.conftest import TEST_SECRET, make_artist

AUTH = {'secret': TEST_SECRET}


@pytest.fixture
def populated(fake_store):
    fake_store.artists = {
        'a1': make_artist('a1', style_ids=[1, 9], image_styles={'a.jpg': [2, 9]}, styles=['Old']),
    }
    return fake_store


@pytest.mark.asyncio
async def test_list_styles(client):
    response = await client.get('/api/styles')
    assert response.status_code == 200
    data = await response.get_json()
    assert data['success'] is True
    assert data['total'] == 3
    assert data['entries'][0]['style_name_ja'] == '和彫り'


@pytest.mark.asyncio
async def test_list_motifs(client):
    data = await (await client.get('/api/motifs')).get_json()
    assert data['kind'] == 'motif'
    assert [e['motif_name_en'] for e in data['entries']] == ['Dragon', 'Tiger']


@pytest.mark.asyncio
async def test_create_requires_secret(client, fake_store):
    response = await client.post('/api/styles', json={'name_ja': '水彩画', 'name_en': 'Watercolor'})
    assert response.status_code == 401
    assert len(fake_store.catalogs['style']) == 3


@pytest.mark.asyncio
async def test_create_style(client, fake_store):
    response = await client.post('/api/styles', json={'name_ja': '水彩画', 'name_en': 'Watercolor'},
                                 query_string=AUTH)
    assert response.status_code == 200
    data = await response.get_json()
    assert data['entry']['id'] == 4


@pytest.mark.asyncio
async def test_create_with_header_secret(client):
    response = await client.post('/api/motifs', json={'name_ja': '鯉', 'name_en': 'Koi'},
                                 headers={'X-System-Secret': TEST_SECRET})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_create_validation_error(client):
    response = await client.post('/api/styles', json={'name_ja': ''}, query_string=AUTH)
    assert response.status_code == 400
    data = await response.get_json()
    assert data['success'] is False


@pytest.mark.asyncio
async def test_update_without_id(client):
    response = await client.put('/api/styles', json={'name_en': 'X'}, query_string=AUTH)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_unknown_id(client):
    response = await client.put('/api/styles', json={'id': 50, 'name_en': 'X'}, query_string=AUTH)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_reports_references(client, populated):
    response = await client.delete('/api/styles', query_string={'id': '2', **AUTH})
    data = await response.get_json()
    assert response.status_code == 200
    assert data['artists_still_referencing'] == 1


@pytest.mark.asyncio
async def test_artist_tags(client, populated):
    response = await client.get('/api/artists/a1/tags', query_string={'lang': 'en'})
    data = await response.get_json()
    assert data['style_source'] == 'style_ids'
    assert data['styles'] == ['Japanese Traditional']
    assert data['image_styles'][0]['names'] == ['Blackwork']


@pytest.mark.asyncio
async def test_unknown_artist_is_404(client, populated):
    response = await client.get('/api/artists/nobody/tags')
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_set_image_styles(client, populated):
    response = await client.put('/api/artists/a1/images/styles',
                                json={'image_url': 'b.jpg', 'tag_ids': [3]}, query_string=AUTH)
    data = await response.get_json()
    assert response.status_code == 200
    assert data['updated_fields'] == ['image_styles', 'styles']
    assert populated.artists['a1'].image_styles[-1].tag_ids == (3,)


@pytest.mark.asyncio
async def test_set_image_tags_needs_body(client, populated):
    response = await client.put('/api/artists/a1/images/motifs', query_string=AUTH)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_repair_defaults_to_dry_run(client, populated):
    response = await client.post('/api/system/repair-tags', query_string=AUTH)
    data = await response.get_json()
    assert data['dry_run'] is True
    assert data['invalid_ids'] == [9]
    assert data['invalid_ids_removed'] == 2
    assert populated.updates == []


@pytest.mark.asyncio
async def test_repair_applies(client, populated):
    response = await client.post('/api/system/repair-tags', json={'dry_run': False}, query_string=AUTH)
    data = await response.get_json()
    assert data['artists_updated'] == 1
    assert populated.artists['a1'].style_ids == (1,)


@pytest.mark.asyncio
async def test_repair_requires_secret(client, populated):
    response = await client.post('/api/system/repair-tags', json={'dry_run': False})
    assert response.status_code == 401
    assert populated.updates == []


@pytest.mark.asyncio
async def test_repair_bad_kind(client):
    response = await client.post('/api/system/repair-tags', json={'kind': 'colour'}, query_string=AUTH)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_repair_fetch_failure_is_500(client, populated):
    populated.fail_artist_fetch = True
    response = await client.post('/api/system/repair-tags', query_string=AUTH)
    assert response.status_code == 500


@pytest.mark.asyncio
async def test_resync_styles(client, fake_store):
    fake_store.artists = {'a1': make_artist('a1', image_styles={'a.jpg': [3]})}
    response = await client.post('/api/system/resync-styles', json={'dry_run': False, 'lang': 'en'},
                                 query_string=AUTH)
    data = await response.get_json()
    assert data['artists_updated'] == 1
    assert fake_store.artists['a1'].styles == ('Realism',)


@pytest.mark.asyncio
async def test_unknown_endpoint(client):
    response = await client.get('/api/nothing-here')
    assert response.status_code == 404
    data = await response.get_json()
    assert data['success'] is False


@pytest.mark.asyncio
async def test_resync_styles_rejects_unknown_language(client, fake_store):
    fake_store.artists = {'a1': make_artist('a1', image_styles={'a.jpg': [3]})}
    response = await client.post('/api/system/resync-styles', json={'dry_run': False, 'lang': 'fr'},
                                 query_string=AUTH)
    assert response.status_code == 400
    assert fake_store.updates == []
