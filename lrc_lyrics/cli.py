from __future__ import annotations

import asyncio
from dataclasses import replace
from pathlib import Path
import typer

from lrc_lyrics.config import load_config
from lrc_lyrics.errors import ConfigError
from lrc_lyrics.logging_setup import setup_logging
from lrc_lyrics.lrc.export import export_json, export_lrc
from lrc_lyrics.lrc.parse import parse_lrc_with_stats
from lrc_lyrics.sources.loader import build_loader


app = typer.Typer(no_args_is_help=True, add_completion=False)


def _render(lines, fmt: str) -> str:
    fmt_l = fmt.lower()
    if fmt_l == "json":
        return export_json(lines) + "\n"
    if fmt_l == "lrc":
        return export_lrc(lines)
    raise typer.BadParameter("format must be one of: lrc, json")


@app.command()
def parse(lrc_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="LRC file")):
    """Parse LRC and print stats."""
    text = lrc_path.read_text(encoding="utf-8")
    _lines, stats = parse_lrc_with_stats(text)
    typer.echo(f"lines_total={stats.lines_total}")
    typer.echo(f"lines_with_timestamps={stats.lines_with_timestamps}")
    typer.echo(f"lines_skipped={stats.lines_skipped}")
    typer.echo(f"entries_total={stats.entries_total}")


@app.command()
def export(
    lrc_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="LRC file"),
    fmt: str = typer.Option("lrc", "--format", case_sensitive=False, help="lrc|json"),
    out: Path | None = typer.Option(None, "--out", help="Output file (default: stdout)"),
):
    """Export LRC to JSON/LRC (normalized, whole seconds)."""
    text = lrc_path.read_text(encoding="utf-8")
    lines, _stats = parse_lrc_with_stats(text)
    data = _render(lines, fmt)

    if out:
        out.write_text(data, encoding="utf-8")
    else:
        typer.echo(data, nl=False)


@app.command()
def get(
    key: str,
    base_path: str | None = typer.Option(None, "--base-path", help="URL or directory prefix for .lrc files"),
    fallback: Path | None = typer.Option(None, "--fallback", help="JSON fallback lyrics table"),
    fmt: str = typer.Option("lrc", "--format", case_sensitive=False, help="lrc|json"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    Load lyrics for KEY: LRC file first, then the fallback table.
    """
    setup_logging(debug)
    try:
        cfg = load_config()
        if base_path is not None:
            cfg = replace(cfg, base_path=base_path)
        if fallback is not None:
            cfg = replace(cfg, fallback_path=fallback)
        loader = build_loader(cfg)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    lines = asyncio.run(loader.get_lyrics(key))
    if not lines:
        typer.echo(f"No lyrics found for: {key}", err=True)
        raise typer.Exit(code=1)
    typer.echo(_render(lines, fmt), nl=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
