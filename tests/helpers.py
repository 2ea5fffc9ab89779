"""Shared helpers for building image records in tests."""

from dockviz.constants import NONE_TAG
from dockviz.managers.image.base import ImageNode

UNTAGGED = (NONE_TAG,)


def make_node(image_id, parent_id="", tags=UNTAGGED, virtual_size=0, size=0):
    """Build an ImageNode with sensible defaults."""
    return ImageNode(
        id=image_id,
        parent_id=parent_id,
        repo_tags=tuple(tags),
        virtual_size=virtual_size,
        size=size,
        created=0,
    )


def record(image_id, parent_id="", tags=None, virtual_size=0, size=0, created=0):
    """Build a raw record in the serialized engine format."""
    raw = {"Id": image_id, "VirtualSize": virtual_size, "Size": size, "Created": created}
    if parent_id:
        raw["ParentId"] = parent_id
    if tags is not None:
        raw["RepoTags"] = list(tags)
    return raw
