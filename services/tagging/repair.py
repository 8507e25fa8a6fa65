"""
Pure planning step of the tag repair job.

Given one artist and the set of IDs that exist in the catalog, work out
which fields need rewriting. Nothing here touches the store; the service in
``services.tag_repair_service`` applies the plans.
"""

from typing import Any, Collection, Dict, List

from .models import Artist, STYLE, columns_for


class RepairPlan:
    """Staged changes for one artist."""

    def __init__(self, artist: Artist, repaired: Artist, changed_fields: List[str],
                 removed_ids: List[Any]):
        self.artist = artist
        self.repaired = repaired
        self.changed_fields = changed_fields
        # One item per removed reference, so an ID removed from two places
        # appears twice
        self.removed_ids = removed_ids

    @property
    def needs_update(self) -> bool:
        return bool(self.changed_fields)

    @property
    def payload(self) -> Dict[str, Any]:
        """Partial-update body: only the fields that changed."""
        return self.repaired.to_fields(self.changed_fields)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'artist_id': self.artist.id,
            'artist_name': self.artist.display_name,
            'changed_fields': list(self.changed_fields),
            'removed_ids': list(self.removed_ids),
            'payload': self.payload,
        }


def plan_artist_repair(artist: Artist, valid_ids: Collection[Any], kind: str = STYLE,
                       prune_empty: bool = False) -> RepairPlan:
    """
    Stage removal of dangling tag IDs from one artist.

    Both checks always run so a single write carries every fix:

    - aggregate: ``style_ids`` (styles only) filtered to valid IDs
    - per-image: each entry's ``tag_ids`` filtered to valid IDs; entries are
      narrowed, not removed, unless ``prune_empty`` is set, in which case an
      entry that loses all of its tags is dropped. Entries that were already
      empty are always kept.
    """
    valid_ids = set(valid_ids)
    changed_fields: List[str] = []
    removed_ids: List[Any] = []
    changes: Dict[str, Any] = {}

    if kind == STYLE and artist.style_ids is not None:
        kept = [tag_id for tag_id in artist.style_ids if tag_id in valid_ids]
        if len(kept) != len(artist.style_ids):
            removed_ids.extend(tag_id for tag_id in artist.style_ids if tag_id not in valid_ids)
            changes['style_ids'] = tuple(kept)
            changed_fields.append('style_ids')

    entries = artist.image_entries(kind)
    rebuilt = []
    image_changed = False
    for entry in entries:
        kept = [tag_id for tag_id in entry.tag_ids if tag_id in valid_ids]
        if len(kept) == len(entry.tag_ids):
            rebuilt.append(entry)
            continue
        image_changed = True
        removed_ids.extend(tag_id for tag_id in entry.tag_ids if tag_id not in valid_ids)
        if kept or not prune_empty:
            rebuilt.append(entry.with_tag_ids(kept))

    if image_changed:
        image_field = columns_for(kind)['image_field']
        changes[image_field] = tuple(rebuilt)
        changed_fields.append(image_field)

    repaired = artist.replace(**changes) if changes else artist
    return RepairPlan(artist, repaired, changed_fields, removed_ids)
