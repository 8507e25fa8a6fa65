"""
Style and motif tagging helpers.

Pure functions over the artist tag model; see services.tag_repair_service
and services.artist_tag_service for the parts that talk to the store.
"""

from .models import (
    STYLE,
    MOTIF,
    TAG_KINDS,
    TagCatalogEntry,
    ImageTagEntry,
    Artist,
    columns_for,
)

from .aggregator import (
    entry_for_image,
    tag_ids_for_image,
    all_tag_ids_across_images,
    images_having_tag,
    artist_has_tag,
    resolve_names,
    describe_image_tags,
)

from .index_mutator import (
    set_tags_for_image,
    remove_tags_for_image,
    prune_unlisted_images,
)

from .legacy import (
    convert_legacy_names_to_ids,
    convert_legacy_styles,
    derive_legacy_aggregate,
    effective_style_source,
    effective_style_tags,
)

from .repair import RepairPlan, plan_artist_repair

__all__ = [
    # Model
    'STYLE',
    'MOTIF',
    'TAG_KINDS',
    'TagCatalogEntry',
    'ImageTagEntry',
    'Artist',
    'columns_for',
    # Aggregator
    'entry_for_image',
    'tag_ids_for_image',
    'all_tag_ids_across_images',
    'images_having_tag',
    'artist_has_tag',
    'resolve_names',
    'describe_image_tags',
    # Mutator
    'set_tags_for_image',
    'remove_tags_for_image',
    'prune_unlisted_images',
    # Legacy
    'convert_legacy_names_to_ids',
    'convert_legacy_styles',
    'derive_legacy_aggregate',
    'effective_style_source',
    'effective_style_tags',
    # Repair planning
    'RepairPlan',
    'plan_artist_repair',
]
