"""CLI for clipshare.

Usage:
    clipshare serve [--host HOST] [--port PORT] [--mirror-clipboard] [--verbose]
    clipshare watch URL [--interval SECONDS] [--copy/--no-copy] [--verbose]
"""
import logging

import click
import pyperclip

from clipshare import config
from clipshare.logs import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="clipshare")
def main() -> None:
    """Share text and images between devices through one web page."""


@main.command()
@click.option("--host", default=config.HOST, show_default=True, help="Interface to bind")
@click.option("--port", default=config.PORT, show_default=True, type=int, help="Port to listen on")
@click.option(
    "--mirror-clipboard",
    is_flag=True,
    default=config.MIRROR_CLIPBOARD,
    help="Also copy shared text into this host's clipboard",
)
@click.option(
    "--max-content-length",
    type=int,
    default=config.MAX_CONTENT_LENGTH,
    help="Reject request bodies larger than this many bytes",
)
@click.option("--verbose", is_flag=True, help="Enable DEBUG-level logging")
def serve(host: str, port: int, mirror_clipboard: bool, max_content_length, verbose: bool) -> None:
    """Run the clipboard server."""
    from clipshare.server import create_app

    configure_logging(verbose)
    app = create_app(settings={
        "MIRROR_CLIPBOARD": mirror_clipboard,
        "MAX_CONTENT_LENGTH": max_content_length,
    })
    logger.info("Starting clipboard server on %s:%d", host, port)
    app.run(host=host, port=port, threaded=True)


@main.command()
@click.argument("url")
@click.option(
    "--interval",
    default=config.POLL_INTERVAL,
    show_default=True,
    type=click.FloatRange(min=0.1),
    help="Seconds between fetches",
)
@click.option("--copy/--no-copy", default=True, show_default=True, help="Copy new remote text to the local clipboard")
@click.option("--verbose", is_flag=True, help="Enable DEBUG-level logging")
def watch(url: str, interval: float, copy: bool, verbose: bool) -> None:
    """Poll a clipboard server and follow its text."""
    from clipshare.poller import Poller, SyncClient

    configure_logging(verbose)
    poller = Poller(SyncClient(url), interval=interval, on_change=_follower(copy))
    click.echo(f"Watching {url} every {interval}s (Ctrl+C to stop)")
    poller.start()
    try:
        poller.wait()
    except KeyboardInterrupt:
        click.echo("Stopped.")
    finally:
        poller.stop()
        poller.client.close()


def _follower(copy: bool):
    """Build an on_change callback that reports (and optionally copies) new text."""
    last = {"text": None}

    def on_change(payload):
        if payload.text == last["text"]:
            return
        last["text"] = payload.text
        click.echo(f"[remote] {payload.text[:60]!r}")
        if copy:
            try:
                pyperclip.copy(payload.text)
            except pyperclip.PyperclipException as e:
                logger.error("Failed to copy to local clipboard: %s", e)

    return on_change


if __name__ == "__main__":
    main()
