"""File-level prepare/restore workflow."""

from grayprep.pipeline.workflow import (
    PreparedImage,
    prepare_image,
    prepare_folder,
    restore_image,
    scaled_path_for,
    restored_path_for,
)

__all__ = [
    "PreparedImage",
    "prepare_image",
    "prepare_folder",
    "restore_image",
    "scaled_path_for",
    "restored_path_for",
]
