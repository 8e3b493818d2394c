"""CLI for restoring filtered 16-bit images to 8 bits."""

import click
from pathlib import Path
from typing import Optional


@click.command()
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output PNG path (default: <name>.filtered.png next to the input)')
def main(input_path: Path, output: Optional[Path]):
    """
    Downscale a 16-bit grayscale image to an 8-bit PNG (value // 256).

    This is not the inverse of grayprep-prepare: prepared images hold 12-bit
    data, so restoring one directly yields the original values divided by 16.
    """
    from grayprep.core.errors import GrayPrepError
    from grayprep.pipeline.workflow import restore_image, restored_path_for

    output_path = output or restored_path_for(input_path)

    try:
        restore_image(input_path, output_path)
    except GrayPrepError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"[OK] Restored image: {output_path}")


if __name__ == '__main__':
    main()
