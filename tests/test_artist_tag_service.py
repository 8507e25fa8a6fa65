"""
Tests for reading and editing one artist's tags
"""
import pytest

from repositories import NotFoundError
from services import artist_tag_service
from services.tagging import MOTIF, STYLE
from tests.conftest import make_artist


@pytest.fixture
def store(fake_store):
    fake_store.artists = {
        'a1': make_artist('a1', image_styles={'a.jpg': [1]}, image_motifs={'a.jpg': [2]},
                          styles=['和彫り'], images=['a.jpg', 'b.jpg']),
    }
    return fake_store


@pytest.mark.unit
class TestGetArtistTags:

    def test_resolves_names(self, store):
        result = artist_tag_service.get_artist_tags('a1', 'en', store=store)
        assert result['style_source'] == 'image_styles'
        assert result['styles'] == ['Japanese Traditional']
        assert result['image_motifs'] == [{'image_url': 'a.jpg', 'tag_ids': [2], 'names': ['Tiger']}]

    def test_unknown_artist(self, store):
        with pytest.raises(NotFoundError):
            artist_tag_service.get_artist_tags('missing', store=store)

    def test_bad_language(self, store):
        with pytest.raises(ValueError):
            artist_tag_service.get_artist_tags('a1', 'de', store=store)


@pytest.mark.unit
class TestUpdateImageTags:

    def test_style_edit_resyncs_legacy_names(self, store):
        result = artist_tag_service.update_image_tags(
            'a1', STYLE, {'image_url': 'b.jpg', 'tag_ids': [3, 1]}, store=store)

        assert result['updated_fields'] == ['image_styles', 'styles']
        artist_id, fields = store.updates[0]
        assert fields['image_styles'] == [
            {'image_url': 'a.jpg', 'style_ids': [1]},
            {'image_url': 'b.jpg', 'style_ids': [3, 1]},
        ]
        assert fields['styles'] == ['和彫り', 'リアリズム']

    def test_clearing_image_removes_entry(self, store):
        artist_tag_service.update_image_tags('a1', STYLE, {'image_url': 'a.jpg', 'tag_ids': []}, store=store)
        assert store.updates[0][1] == {'image_styles': [], 'styles': []}

    def test_motif_edit_only_writes_motifs(self, store):
        artist_tag_service.update_image_tags('a1', MOTIF, {'image_url': 'a.jpg', 'tag_ids': [1]}, store=store)
        assert store.updates == [('a1', {'image_motifs': [{'image_url': 'a.jpg', 'motif_ids': [1]}]})]

    def test_unchanged_tags_do_not_write(self, store):
        result = artist_tag_service.update_image_tags(
            'a1', STYLE, {'image_url': 'a.jpg', 'tag_ids': [1]}, store=store)
        assert result['updated_fields'] == []
        assert store.updates == []

    @pytest.mark.parametrize('data', [
        {'tag_ids': [1]},
        {'image_url': 'a.jpg', 'tag_ids': 'one'},
        {'image_url': 'a.jpg', 'tag_ids': [True]},
        {'image_url': 'a.jpg', 'tag_ids': [0]},
        {'image_url': 'a.jpg', 'tag_ids': [2.9]},
        {'image_url': 'a.jpg', 'tag_ids': ['3']},
        {'image_url': '   ', 'tag_ids': [1]},
    ])
    def test_rejects_bad_body(self, store, data):
        with pytest.raises(ValueError):
            artist_tag_service.update_image_tags('a1', STYLE, data, store=store)

    def test_rejected_body_writes_nothing(self, store):
        with pytest.raises(ValueError):
            artist_tag_service.update_image_tags(
                'a1', STYLE, {'image_url': 'a.jpg', 'tag_ids': [2.9]}, store=store)
        assert store.updates == []

    def test_whole_float_ids_are_accepted(self, store):
        result = artist_tag_service.update_image_tags(
            'a1', STYLE, {'image_url': 'a.jpg', 'tag_ids': [2.0]}, store=store)
        assert result['tag_ids'] == [2]

    def test_image_url_is_matched_exactly(self, store):
        store.artists['a1'] = make_artist('a1', image_styles={' a.jpg ': [1]})
        artist_tag_service.update_image_tags(
            'a1', STYLE, {'image_url': ' a.jpg ', 'tag_ids': [2]}, store=store)
        assert store.updates[0][1]['image_styles'] == [{'image_url': ' a.jpg ', 'style_ids': [2]}]
