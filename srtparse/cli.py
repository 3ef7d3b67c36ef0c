"""Click CLI for srtparse — check, show, stats."""

import json
import sys
from itertools import islice
from pathlib import Path

import click

from srtparse.log import setup_logging, get_logger
from srtparse.exceptions import ParseError, SrtParseError
from srtparse.models import ReaderConfig

logger = get_logger(__name__)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Log every parsed subtitle at DEBUG level.')
@click.option('--log-file', default=None, type=click.Path(dir_okay=False),
              help='Also write log records to this file.')
@click.option('--encoding', '-e', default='utf-8', help='Encoding of the subtitle files.')
@click.pass_context
def cli(ctx, verbose, log_file, encoding):
    """srtparse — SubRip (SRT) subtitle parser."""
    setup_logging(verbose=verbose, log_file=log_file)
    ctx.obj = ReaderConfig(encoding=encoding)


def _describe(e: SrtParseError) -> str:
    if isinstance(e, ParseError) and e.line:
        return f"line {e.line}: {e.message}"
    return e.message


@cli.command()
@click.argument('srt_files', nargs=-1, required=True, type=click.Path())
@click.pass_obj
def check(config, srt_files):
    """Validate one or more SRT files."""
    from srtparse.reader import from_file

    failed = 0
    for srt_file in srt_files:
        try:
            items = from_file(Path(srt_file), config)
        except SrtParseError as e:
            failed += 1
            logger.debug("Validation failed for %s: %s", srt_file, e.to_dict())
            click.echo(f"Error: {srt_file}: {_describe(e)}", err=True)
            continue
        click.echo(f"OK {srt_file}: {len(items)} subtitles")

    if failed:
        sys.exit(1)


@cli.command()
@click.argument('srt_file', type=click.Path())
@click.option('--format', '-f', 'fmt', type=click.Choice(['text', 'json']), default='text',
              help='Output format.')
@click.option('--limit', '-n', default=None, type=click.IntRange(min=0),
              help='Show at most this many subtitles.')
@click.pass_obj
def show(config, srt_file, fmt, limit):
    """Print the subtitles of an SRT file."""
    from srtparse.reader import iter_file

    try:
        items = list(islice(iter_file(Path(srt_file), config), limit))
    except SrtParseError as e:
        click.echo(f"Error: {_describe(e)}", err=True)
        sys.exit(1)

    if fmt == 'json':
        click.echo(json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False))
    else:
        click.echo('\n\n'.join(str(item) for item in items))


@cli.command()
@click.argument('srt_file', type=click.Path())
@click.pass_obj
def stats(config, srt_file):
    """Summarize the timing of an SRT file."""
    from srtparse.reader import from_file

    try:
        items = from_file(Path(srt_file), config)
    except SrtParseError as e:
        click.echo(f"Error: {_describe(e)}", err=True)
        sys.exit(1)

    click.echo(f"Subtitles: {len(items)}")
    if not items:
        return
    on_screen_ms = sum(
        max(item.end_time.to_milliseconds() - item.start_time.to_milliseconds(), 0) for item in items
    )
    click.echo(f"First start: {items[0].start_time}")
    click.echo(f"Last end: {items[-1].end_time}")
    click.echo(f"On screen: {on_screen_ms / 1000:.3f}s")
