"""
Tests for the tag data model and its wire format
"""
import pytest

from services.tagging import MOTIF, STYLE, Artist, ImageTagEntry, TagCatalogEntry, columns_for


@pytest.mark.unit
class TestArtistFromRow:

    def test_full_row(self):
        artist = Artist.from_row({
            'id': 'a1',
            'name_ja': '彫師',
            'portfolio_images': ['a.jpg', 'b.jpg'],
            'style_ids': [1, 2],
            'styles': ['和彫り'],
            'image_styles': [{'image_url': 'a.jpg', 'style_ids': [1]}],
            'image_motifs': [{'image_url': 'b.jpg', 'motif_ids': [4, 5]}],
        })
        assert artist.display_name == '彫師'
        assert artist.images == ('a.jpg', 'b.jpg')
        assert artist.image_styles == (ImageTagEntry('a.jpg', [1]),)
        assert artist.image_entries(MOTIF)[0].tag_ids == (4, 5)

    def test_null_and_malformed_columns(self):
        artist = Artist.from_row({
            'id': 'a2',
            'style_ids': None,
            'styles': 'not a list',
            'image_styles': [{'image_url': 'a.jpg', 'style_ids': 'x'}, 'garbage', {'image_url': 'b.jpg'}],
            'image_motifs': {'image_url': 'a.jpg'},
        })
        assert artist.style_ids is None
        assert artist.styles == ()
        assert [e.tag_ids for e in artist.image_styles] == [(), (), ()]
        assert [e.is_opaque for e in artist.image_styles] == [False, True, False]
        assert artist.image_motifs == ()
        assert artist.display_name == 'a2'

    def test_nested_ids_are_skipped(self):
        artist = Artist.from_row({'id': 'a3', 'style_ids': [1, [2], {'id': 3}, 4]})
        assert artist.style_ids == (1, 4)

    def test_unedited_entries_are_written_back_as_read(self):
        stored = [
            {'image_url': 'a.jpg', 'style_ids': 'x', 'note': {'by': 'admin'}},
            'garbage',
            None,
            {'image_url': 'b.jpg'},
        ]
        artist = Artist.from_row({'id': 'a4', 'image_styles': stored})
        assert artist.to_fields(['image_styles']) == {'image_styles': stored}

    def test_edited_entry_is_rebuilt(self):
        artist = Artist.from_row({'id': 'a5', 'image_styles': [{'image_url': 'b.jpg'}]})
        entry = artist.image_styles[0].with_tag_ids([2])
        assert entry.to_row('style_ids') == {'image_url': 'b.jpg', 'style_ids': [2]}

    def test_empty_style_ids_is_not_none(self):
        assert Artist.from_row({'id': 'a4', 'style_ids': []}).style_ids == ()


@pytest.mark.unit
class TestSerialization:

    def test_to_fields_uses_kind_keys(self):
        artist = Artist('a1', style_ids=[1], image_motifs=[ImageTagEntry('a.jpg', [2], {'note': 'x'})])
        assert artist.to_fields(['style_ids', 'image_motifs']) == {
            'style_ids': [1],
            'image_motifs': [{'note': 'x', 'image_url': 'a.jpg', 'motif_ids': [2]}],
        }

    def test_to_fields_rejects_unknown(self):
        with pytest.raises(ValueError):
            Artist('a1').to_fields(['name_ja'])

    def test_replace(self):
        artist = Artist('a1', styles=['Old'])
        assert artist.replace(styles=('New',)).styles == ('New',)
        assert artist.styles == ('Old',)
        with pytest.raises(TypeError):
            artist.replace(nickname='x')

    def test_catalog_entry_round_trip(self):
        row = {'id': 3, 'motif_name_ja': '鯉', 'motif_name_en': 'Koi', 'created_at': None, 'updated_at': None}
        entry = TagCatalogEntry.from_row(row, MOTIF)
        assert entry.name_for('en') == 'Koi'
        assert entry.to_dict() == row


@pytest.mark.unit
def test_columns_for():
    assert columns_for(STYLE)['id_key'] == 'style_ids'
    with pytest.raises(ValueError):
        columns_for('colour')
