"""CLI for preparing 8-bit images for upload."""

import json
import click
from pathlib import Path
from typing import Optional

from grayprep.config import load_config


@click.command()
@click.argument('input_path', type=click.Path(exists=True, path_type=Path))
@click.option('--output', '-o', type=click.Path(path_type=Path),
              help='Output folder (default: next to each input image)')
@click.option('--bit-depth', type=click.IntRange(1, 16), default=None,
              help='LUT bit depth (default from config: 12)')
@click.option('--gamma', type=float, default=None,
              help='LUT gamma, stored unchanged (default from config: 1.0)')
@click.option('--binning', type=click.Choice(['Unbinned', 'Binned2x2']), default=None,
              help='Acquisition binning mode for the image-info record')
@click.option('--workers', '-w', type=click.IntRange(min=1), default=None,
              help='Threads used for the gray-range scan')
@click.option('--no-info', is_flag=True, help='Do not write the image-info JSON file')
@click.option('--config', type=click.Path(exists=True, path_type=Path),
              help='Path to config file')
@click.option('--quiet', '-q', is_flag=True, help='Only report errors and results')
def main(input_path: Path, output: Optional[Path], bit_depth: Optional[int],
         gamma: Optional[float], binning: Optional[str], workers: Optional[int],
         no_info: bool, config: Optional[Path], quiet: bool):
    """
    Upscale 8-bit grayscale images to 12-bit data in 16-bit PNGs.

    INPUT_PATH is a single image or a folder of images. For each image this
    writes <name>.scaled12.png and, unless --no-info is given, the matching
    <name>.scaled12.json image-info record whose LUT min/max grays are the
    swapped extrema of the scaled image.
    """
    from grayprep.core.errors import GrayPrepError
    from grayprep.core.logging_utils import get_logger
    from grayprep.pipeline.workflow import prepare_image, prepare_folder

    cfg = load_config(config)
    get_logger(verbose=not quiet)

    output_folder = output or cfg.get('output.folder')
    options = dict(
        bit_depth=bit_depth if bit_depth is not None else cfg.get('lut.bit_depth'),
        gamma=gamma if gamma is not None else cfg.get('lut.gamma'),
        binning=binning or cfg.get('acquisition.binning'),
        workers=workers if workers is not None else cfg.get('scan.workers'),
        save_info=False if no_info else cfg.get('output.save_info'),
    )

    if input_path.is_dir():
        prepared = prepare_folder(
            input_path,
            output_folder=Path(output_folder) if output_folder else None,
            extensions=set(cfg.get('image.extensions')),
            **options,
        )
        if not prepared:
            click.echo("Error: no images were prepared", err=True)
            raise SystemExit(1)
        return

    try:
        result = prepare_image(
            input_path,
            output_folder=Path(output_folder) if output_folder else None,
            **options,
        )
    except GrayPrepError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"[OK] Scaled image: {result.scaled_path}")
    if result.info_path:
        click.echo(f"[OK] Image info: {result.info_path}")
    click.echo(json.dumps(result.image_info, indent=2))


if __name__ == '__main__':
    main()
