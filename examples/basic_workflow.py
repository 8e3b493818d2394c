#!/usr/bin/env python3
"""
Example workflow: Prepare -> (filter service) -> Restore

This script shows how to use the grayprep package programmatically. The
upload to the filter service is left to the caller; the image-info record
printed here is what accompanies the scaled image.
"""

import json
from pathlib import Path

from grayprep.pipeline.workflow import prepare_image, restore_image, restored_path_for


def main():
    """Run the prepare/restore workflow on one image."""

    input_image = Path("data/scan.png")
    filtered_image = Path("data/scan.scaled12.filtered-response.png")

    print("=" * 60)
    print("Grayscale Filter Preparation Workflow")
    print("=" * 60)

    # Step 1: Upscale to 12 bits and build the LUT record
    print("\nStep 1: Preparing image...")
    print("-" * 60)
    prepared = prepare_image(input_image, gamma=1.0)
    print(f"Scaled image: {prepared.scaled_path}")
    print(f"Gray range: {prepared.gray_range.minimum}-{prepared.gray_range.maximum}")
    print(json.dumps(prepared.image_info, indent=2))

    # Step 2: upload prepared.scaled_path with prepared.image_info and
    # download the filtered 16-bit result to filtered_image.

    # Step 3: Restore the filtered result to 8 bits
    print("\nStep 3: Restoring filtered image...")
    print("-" * 60)
    output = restore_image(filtered_image, restored_path_for(input_image))
    print(f"Restored image: {output}")

    print("\n" + "=" * 60)
    print("Workflow complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
