"""CLI for pispiro."""

import logging
from pathlib import Path

import click

from .config import Config


def _load_config(path: Path | None) -> Config:
    return Config.load(path) if path else Config()


@click.group(invoke_without_command=True)
@click.option("--config", "-c", "config_path", type=Path, help="JSON config file")
@click.option("--verbose", "-v", is_flag=True)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool):
    """pispiro - Spirograph grid and pi turtle-walk poster as SVG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    ctx.obj = _load_config(config_path)
    if ctx.invoked_subcommand is None:
        ctx.invoke(render)


@main.command()
@click.pass_obj
def spirograph(config: Config):
    """Render the spirograph grid."""
    from .scenes import render_spirographs

    try:
        path = render_spirographs(config)
    except OSError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Saved: {path}")


@main.command()
@click.pass_obj
def poster(config: Config):
    """Render the pi poster."""
    from .scenes import render_pi_poster

    try:
        path = render_pi_poster(config, progress=True)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Saved: {path}")


@main.command()
@click.pass_context
def render(ctx: click.Context):
    """Render both images, spirograph first."""
    ctx.invoke(spirograph)
    ctx.invoke(poster)


@main.command()
@click.option("--count", "-n", default=100_000, type=int)
@click.option("--output", "-o", type=Path, help="Defaults to the configured digits path")
@click.pass_obj
def digits(config: Config, count: int, output: Path | None):
    """Compute decimals of pi and write the digit resource."""
    from .digits import write_digits

    if count <= 0:
        raise click.BadParameter("must be positive", param_hint="--count")
    path = write_digits(output or config.digits_path, count)
    click.echo(f"Wrote {count} digits → {path}")


if __name__ == "__main__":
    main()
