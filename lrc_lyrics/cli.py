from __future__ import annotations

from datetime import timedelta
from pathlib import Path

from colorama import Fore, Style, just_fix_windows_console
import typer

from lrc_lyrics.config import EXPORT_FORMATS, load_config
from lrc_lyrics.logging_setup import setup_logging
from lrc_lyrics.lrc.export import export_json, export_lrc, export_srt, format_lrc_time
from lrc_lyrics.lrc.model import Lyrics
from lrc_lyrics.lrc.parse import load_lrc_file, parse_lrc_with_stats


app = typer.Typer(no_args_is_help=True, add_completion=False)


def _load_or_exit(lrc_path: Path, encoding: str | None) -> Lyrics:
    lyrics = load_lrc_file(lrc_path, encoding=encoding)
    if lyrics is None:
        typer.echo(f"No lyrics found in {lrc_path}", err=True)
        raise typer.Exit(code=1)
    return lyrics


@app.command()
def parse(
    lrc_path: Path,
    encoding: str | None = typer.Option(None, "--encoding", help="Text encoding (default: platform default)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Parse LRC and print stats."""
    setup_logging(debug)
    cfg = load_config()
    try:
        text = lrc_path.read_text(encoding=encoding or cfg.encoding)
    except (OSError, ValueError, LookupError) as e:
        typer.echo(f"Cannot read {lrc_path}: {e}", err=True)
        raise typer.Exit(code=1)

    doc, stats = parse_lrc_with_stats(text)
    typer.echo(f"lines_total={stats.lines_total}")
    typer.echo(f"lines_blank={stats.lines_blank}")
    typer.echo(f"lines_metadata={stats.lines_metadata}")
    typer.echo(f"lines_with_timestamps={stats.lines_with_timestamps}")
    typer.echo(f"lines_ignored={stats.lines_ignored}")
    typer.echo(f"events_total={stats.events_total}")
    if doc is None:
        typer.echo("No timed lines found", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"title={doc.title}")
    typer.echo(f"artist={doc.artist}")
    typer.echo(f"album={doc.album}")


@app.command()
def show(
    lrc_path: Path,
    encoding: str | None = typer.Option(None, "--encoding", help="Text encoding (default: platform default)"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored timestamps"),
):
    """Print lyric lines in file order."""
    cfg = load_config()
    lyrics = _load_or_exit(lrc_path, encoding or cfg.encoding)

    header = " - ".join(v for v in (lyrics.artist, lyrics.title) if v)
    if header:
        typer.echo(header if no_color else f"{Style.BRIGHT}{header}{Style.RESET_ALL}")
    for line in lyrics.lines:
        stamp = f"[{format_lrc_time(line.time)}]"
        if not no_color:
            stamp = f"{Fore.CYAN}{stamp}{Style.RESET_ALL}"
        typer.echo(f"{stamp} {line.text}".rstrip())


@app.command()
def export(
    lrc_path: Path,
    fmt: str | None = typer.Option(None, "--format", case_sensitive=False, help="lrc|srt|json"),
    out: Path | None = typer.Option(None, "--out", help="Output file (default: stdout)"),
    encoding: str | None = typer.Option(None, "--encoding", help="Text encoding (default: platform default)"),
):
    """Export LRC to SRT/JSON/LRC."""
    cfg = load_config()
    fmt_l = (fmt or cfg.export_format).lower()
    if fmt_l not in EXPORT_FORMATS:
        raise typer.BadParameter("format must be one of: lrc, srt, json")

    lyrics = _load_or_exit(lrc_path, encoding or cfg.encoding)
    if fmt_l == "json":
        data = export_json(lyrics) + "\n"
    elif fmt_l == "lrc":
        data = export_lrc(lyrics)
    else:
        data = export_srt(lyrics, last_line=timedelta(milliseconds=cfg.srt_last_line_ms))

    if out:
        out.write_text(data, encoding="utf-8")
    else:
        typer.echo(data, nl=False)


def main() -> None:
    just_fix_windows_console()
    app()


if __name__ == "__main__":
    main()
