"""Tag catalog and artist tag data model.

The hosted store names columns per tag kind (``style_name_ja``,
``image_motifs[*].motif_ids`` ...). Those names only appear here; the rest
of the code works with ``name_ja``/``name_en`` and ``tag_ids``.
"""

import copy
from typing import Any, Dict, Iterable, List, Optional, Tuple

STYLE = 'style'
MOTIF = 'motif'
TAG_KINDS = [STYLE, MOTIF]

# Marks an ImageTagEntry built in code rather than read from a stored row
_UNREAD = object()

KIND_COLUMNS = {
    STYLE: {
        'table': 'styles',
        'name_ja': 'style_name_ja',
        'name_en': 'style_name_en',
        'image_field': 'image_styles',
        'id_key': 'style_ids',
    },
    MOTIF: {
        'table': 'motifs',
        'name_ja': 'motif_name_ja',
        'name_en': 'motif_name_en',
        'image_field': 'image_motifs',
        'id_key': 'motif_ids',
    },
}


def scalar_items(value: Any) -> List[Any]:
    """Items of a stored array that can be used as IDs or names.

    Nested arrays and objects in malformed rows are skipped.
    """
    return [item for item in value if isinstance(item, (int, str, float))]


def columns_for(kind: str) -> Dict[str, str]:
    try:
        return KIND_COLUMNS[kind]
    except KeyError:
        raise ValueError(f"Unknown tag kind: {kind!r}") from None


class TagCatalogEntry:
    """A Style or Motif record. ``id`` is the only stable reference key."""

    def __init__(self, id: int, name_ja: str, name_en: str, kind: str = STYLE,
                 created_at: Optional[str] = None, updated_at: Optional[str] = None):
        self.id = id
        self.name_ja = name_ja
        self.name_en = name_en
        self.kind = kind
        self.created_at = created_at
        self.updated_at = updated_at

    @classmethod
    def from_row(cls, row: Dict[str, Any], kind: str) -> 'TagCatalogEntry':
        cols = columns_for(kind)
        return cls(
            id=row['id'],
            name_ja=row.get(cols['name_ja']) or '',
            name_en=row.get(cols['name_en']) or '',
            kind=kind,
            created_at=row.get('created_at'),
            updated_at=row.get('updated_at'),
        )

    def name_for(self, language: str) -> str:
        return self.name_en if language == 'en' else self.name_ja

    def to_dict(self) -> Dict[str, Any]:
        cols = columns_for(self.kind)
        return {
            'id': self.id,
            cols['name_ja']: self.name_ja,
            cols['name_en']: self.name_en,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }

    def __eq__(self, other):
        if not isinstance(other, TagCatalogEntry):
            return NotImplemented
        return (self.id, self.name_ja, self.name_en, self.kind) == \
            (other.id, other.name_ja, other.name_en, other.kind)

    def __repr__(self):
        return f"TagCatalogEntry({self.kind} #{self.id} {self.name_ja!r}/{self.name_en!r})"


class ImageTagEntry:
    """Tags assigned to one portfolio image, keyed by ``image_url``.

    ``extra`` carries any other keys found on the stored entry (such as the
    optional ``style_names`` display cache) so rewriting an entry does not
    lose them.

    ``raw`` is the stored item the entry was read from. Until the tags are
    changed, ``to_row`` writes it back as it was, so entries a job does not
    touch are not normalized. Items that are not objects at all are kept as
    opaque entries with no URL and no tags.
    """

    def __init__(self, image_url: str, tag_ids: Iterable[Any] = (),
                 extra: Optional[Dict[str, Any]] = None, raw: Any = _UNREAD):
        self.image_url = image_url
        self.tag_ids: Tuple[Any, ...] = tuple(tag_ids)
        self.extra = dict(extra or {})
        self.raw = raw

    @classmethod
    def from_row(cls, row: Any, kind: str) -> 'ImageTagEntry':
        if not isinstance(row, dict):
            return cls('', (), raw=row)
        id_key = columns_for(kind)['id_key']
        tag_ids = row.get(id_key)
        extra = {k: v for k, v in row.items() if k not in ('image_url', id_key)}
        return cls(
            image_url=row.get('image_url') or '',
            tag_ids=scalar_items(tag_ids) if isinstance(tag_ids, list) else (),
            extra=extra,
            raw=row,
        )

    @property
    def is_opaque(self) -> bool:
        return self.raw is not _UNREAD and not isinstance(self.raw, dict)

    def to_row(self, kind: str) -> Any:
        if self.raw is not _UNREAD:
            return copy.deepcopy(self.raw)
        row = dict(self.extra)
        row['image_url'] = self.image_url
        row[columns_for(kind)['id_key']] = list(self.tag_ids)
        return row

    def with_tag_ids(self, tag_ids: Iterable[Any]) -> 'ImageTagEntry':
        return ImageTagEntry(self.image_url, tag_ids, self.extra)

    def __eq__(self, other):
        if not isinstance(other, ImageTagEntry):
            return NotImplemented
        if self.is_opaque or other.is_opaque:
            return self.is_opaque and other.is_opaque and self.raw == other.raw
        return (self.image_url, self.tag_ids, self.extra) == \
            (other.image_url, other.tag_ids, other.extra)

    def __repr__(self):
        if self.is_opaque:
            return f"ImageTagEntry(<unparsed {self.raw!r}>)"
        return f"ImageTagEntry({self.image_url!r}, {list(self.tag_ids)})"


class Artist:
    """The tag-relevant projection of an artist record.

    Instances are treated as immutable: every helper that changes tags
    returns a new Artist via ``replace``.

    ``style_ids`` is None when the stored record has no usable array, which
    is different from an empty list.
    """

    FIELDS = ('id', 'name_ja', 'name_en', 'style_ids', 'styles',
              'image_styles', 'image_motifs', 'images')

    def __init__(self, id: str, name_ja: str = '', name_en: str = '',
                 style_ids: Optional[Iterable[Any]] = None,
                 styles: Iterable[Any] = (),
                 image_styles: Iterable[ImageTagEntry] = (),
                 image_motifs: Iterable[ImageTagEntry] = (),
                 images: Iterable[str] = ()):
        self.id = id
        self.name_ja = name_ja
        self.name_en = name_en
        self.style_ids = tuple(style_ids) if style_ids is not None else None
        self.styles = tuple(styles)
        self.image_styles = tuple(image_styles)
        self.image_motifs = tuple(image_motifs)
        self.images = tuple(images)

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> 'Artist':
        style_ids = row.get('style_ids')
        styles = row.get('styles')
        images = row.get('portfolio_images') or row.get('images')
        return cls(
            id=row['id'],
            name_ja=row.get('name_ja') or '',
            name_en=row.get('name_en') or '',
            style_ids=scalar_items(style_ids) if isinstance(style_ids, list) else None,
            styles=scalar_items(styles) if isinstance(styles, list) else (),
            image_styles=_parse_entries(row.get('image_styles'), STYLE),
            image_motifs=_parse_entries(row.get('image_motifs'), MOTIF),
            images=images if isinstance(images, list) else (),
        )

    @property
    def display_name(self) -> str:
        return self.name_ja or self.name_en or str(self.id)

    def image_entries(self, kind: str) -> Tuple[ImageTagEntry, ...]:
        return self.image_motifs if kind == MOTIF else self.image_styles

    def replace(self, **changes) -> 'Artist':
        unknown = set(changes) - set(self.FIELDS)
        if unknown:
            raise TypeError(f"Unknown Artist fields: {sorted(unknown)}")
        values = {name: getattr(self, name) for name in self.FIELDS}
        values.update(changes)
        return Artist(**values)

    def with_image_entries(self, kind: str, entries: Iterable[ImageTagEntry]) -> 'Artist':
        return self.replace(**{columns_for(kind)['image_field']: tuple(entries)})

    def to_fields(self, field_names: Iterable[str]) -> Dict[str, Any]:
        """Serialize the named fields into the store's partial-update shape."""
        payload: Dict[str, Any] = {}
        for name in field_names:
            if name == 'image_styles':
                payload[name] = [entry.to_row(STYLE) for entry in self.image_styles]
            elif name == 'image_motifs':
                payload[name] = [entry.to_row(MOTIF) for entry in self.image_motifs]
            elif name == 'style_ids':
                payload[name] = list(self.style_ids) if self.style_ids is not None else None
            elif name == 'styles':
                payload[name] = list(self.styles)
            else:
                raise ValueError(f"Field {name!r} is not writable")
        return payload

    def __eq__(self, other):
        if not isinstance(other, Artist):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self.FIELDS)

    def __repr__(self):
        return f"Artist({self.id!r}, {self.display_name!r})"


def _parse_entries(value: Any, kind: str) -> List[ImageTagEntry]:
    if not isinstance(value, list):
        return []
    return [ImageTagEntry.from_row(item, kind) for item in value]
