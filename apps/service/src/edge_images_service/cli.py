"""CLI for Edge Images."""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path

import click

from edge_images import (
    EdgeImagesError,
    ImageSource,
    RenderContext,
    TransformRequest,
    build_transformed_url,
    constrain_to_content_width,
    image_source_from_file,
)
from edge_images.models import FIT_MODES

from .config import ServiceConfig


def _engine_config(ctx: click.Context):
    return ctx.obj["config"].engine


@click.group()
@click.option("--provider-host", default=None, help="Edge provider host, e.g. https://example.com")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
@click.pass_context
def cli(ctx: click.Context, provider_host: str | None, verbose: bool) -> None:
    """Build edge provider image URLs and srcset ladders."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        config = ServiceConfig.load()
    except (ValueError, EdgeImagesError) as e:
        raise click.ClickException(f"Invalid EDGE_IMAGES_* configuration: {e}") from e
    if provider_host:
        config = dataclasses.replace(config, engine=config.engine.with_host(provider_host))
    ctx.obj = {"config": config}


@cli.command()
@click.argument("src")
@click.option("-w", "--width", required=True, type=int, help="Target width")
@click.option("-h", "--height", default=None, type=int, help="Target height")
@click.option("--fit", default="contain", type=click.Choice(sorted(FIT_MODES)), help="Fit mode")
@click.pass_context
def url(ctx: click.Context, src: str, width: int, height: int | None, fit: str) -> None:
    """Print the provider URL for SRC at one size."""
    try:
        request = TransformRequest(width=width, height=height, fit=fit)  # type: ignore[arg-type]
        click.echo(str(build_transformed_url(ImageSource(src), request, _engine_config(ctx))))
    except EdgeImagesError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("src")
@click.option("--intrinsic-width", default=None, type=int, help="Source width in pixels")
@click.option("--intrinsic-height", default=None, type=int, help="Source height in pixels")
@click.option("--image", "image_path", default=None,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Local copy of the image to read dimensions from")
@click.option("--content-width", default=None, type=int, help="Content width override")
@click.option("--lines", is_flag=True, help="One candidate per line")
@click.pass_context
def srcset(ctx: click.Context, src: str, intrinsic_width: int | None, intrinsic_height: int | None,
           image_path: Path | None, content_width: int | None, lines: bool) -> None:
    """Print the default srcset ladder for SRC."""
    try:
        if image_path is not None:
            source = image_source_from_file(src, image_path)
        else:
            source = ImageSource(src, intrinsic_width, intrinsic_height)

        render = RenderContext(_engine_config(ctx), content_width=content_width)
        ladder = render.srcset_ladder(source)
        if lines:
            for entry in ladder:
                click.echo(str(entry))
        else:
            click.echo(str(ladder))
    except EdgeImagesError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("width", type=int)
@click.argument("height", type=int)
@click.option("--max-width", default=None, type=int, help="Ceiling, defaults to the content width")
@click.pass_context
def constrain(ctx: click.Context, width: int, height: int, max_width: int | None) -> None:
    """Scale WIDTH x HEIGHT to fit the content width."""
    ceiling = max_width or RenderContext(_engine_config(ctx)).ceiling
    try:
        dims = constrain_to_content_width(width, height, ceiling)
    except EdgeImagesError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"{dims.width}x{dims.height}")


@cli.command()
@click.option("-h", "--host", default=None, help="Bind host")
@click.option("-p", "--port", default=None, type=int, help="Bind port")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Run the HTTP service."""
    from .app import create_app

    config: ServiceConfig = ctx.obj["config"]
    app = create_app(config)
    try:
        app.run(host=host or config.host, port=port or config.port, use_reloader=False)
    except KeyboardInterrupt:
        logging.info("Interrupted")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
