# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Annotated, Any, TypeVar

import httpx
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wpkit.core.config import get_settings
from wpkit.core.exceptions import ConfigurationError, WPKitError
from wpkit.core.logging import setup_logging
from wpkit.models.editor_settings import EditorSettings
from wpkit.models.jetpack_backup import JetpackBackup
from wpkit.models.jetpack_scan import JetpackScanThreat
from wpkit.models.site_creation import SiteCreationRequest
from wpkit.services.editor import EditorServiceRemote
from wpkit.services.jetpack_backup import JetpackBackupServiceRemote
from wpkit.services.jetpack_scan import JetpackScanServiceRemote
from wpkit.services.plugin_directory import PluginDirectoryServiceRemote
from wpkit.services.site_creation import WordPressComServiceRemote

T = TypeVar("T")

app = typer.Typer(
    name="wpkit",
    help="Command-line client for the WordPress.com REST API",
    no_args_is_help=True,
)
editor_app = typer.Typer(help="Mobile editor preference")
backup_app = typer.Typer(help="Jetpack backup downloads")
scan_app = typer.Typer(help="Jetpack Scan threats")
plugin_app = typer.Typer(help="WordPress.org plugin directory")
site_app = typer.Typer(help="WordPress.com sites")

app.add_typer(editor_app, name="editor")
app.add_typer(backup_app, name="backup")
app.add_typer(scan_app, name="scan")
app.add_typer(plugin_app, name="plugin")
app.add_typer(site_app, name="site")

console = Console()


@app.callback()
def main(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Override WPKIT_LOG_LEVEL")
    ] = None,
) -> None:
    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_format)


def _run(call: Coroutine[Any, Any, T]) -> T:
    """Run a service coroutine, turning failures into exit code 1."""
    try:
        return asyncio.run(call)
    except (WPKitError, httpx.HTTPError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from None


# ---------------------------------------------------------------------------
# editor
# ---------------------------------------------------------------------------


@editor_app.command(name="get")
def editor_get(
    site_id: Annotated[int, typer.Argument(help="WordPress.com site ID")],
) -> None:
    """Show the site's mobile editor."""
    editor = _run(EditorServiceRemote().get_editor_settings(site_id))
    console.print(f"Site [bold]{site_id}[/bold] mobile editor: [cyan]{editor.value}[/cyan]")


@editor_app.command(name="set")
def editor_set(
    site_id: Annotated[int, typer.Argument(help="WordPress.com site ID")],
    editor: Annotated[EditorSettings, typer.Argument(help="Editor to designate")],
) -> None:
    """Designate the site's mobile editor."""
    stored = _run(EditorServiceRemote().set_mobile_editor(site_id, editor))
    console.print(f"Site [bold]{site_id}[/bold] mobile editor set to [cyan]{stored.value}[/cyan]")


# ---------------------------------------------------------------------------
# backup
# ---------------------------------------------------------------------------


def _print_backup(backup: JetpackBackup) -> None:
    lines = [
        f"Download ID: {backup.download_id}",
        f"Rewind ID:   {backup.rewind_id}",
        f"Backup point: {backup.backup_point.isoformat()}",
        f"Started:     {backup.started_at.isoformat()}",
    ]
    if backup.progress is not None:
        lines.append(f"Progress:    {backup.progress}%")
    if backup.url:
        lines.append(f"URL:         {backup.url}")
    if backup.valid_until:
        lines.append(f"Valid until: {backup.valid_until.isoformat()}")
    console.print(Panel("\n".join(lines), title="Jetpack backup", expand=False))


@backup_app.command(name="prepare")
def backup_prepare(
    site_id: Annotated[int, typer.Argument(help="WordPress.com site ID")],
    rewind_id: Annotated[
        str | None, typer.Option("--rewind-id", help="Rewind point to snapshot")
    ] = None,
) -> None:
    """Prepare a downloadable backup."""
    _print_backup(_run(JetpackBackupServiceRemote().prepare_backup(site_id, rewind_id=rewind_id)))


@backup_app.command(name="status")
def backup_status(
    site_id: Annotated[int, typer.Argument(help="WordPress.com site ID")],
    download_id: Annotated[
        int | None, typer.Option("--download-id", help="Specific download to query")
    ] = None,
) -> None:
    """Show the status of a backup download."""
    _print_backup(
        _run(JetpackBackupServiceRemote().get_backup_status(site_id, download_id=download_id))
    )


# ---------------------------------------------------------------------------
# scan
# ---------------------------------------------------------------------------


def _print_context(threat: JetpackScanThreat) -> None:
    if threat.context is None:
        return
    for line in threat.context.lines:
        text = Text(f"{line.line_number:>5}: ")
        body = Text(line.contents)
        for highlight in line.highlights:
            body.stylize("bold red", highlight.start, highlight.end)
        console.print(text + body)


@scan_app.command(name="threats")
def scan_threats(
    site_id: Annotated[int, typer.Argument(help="WordPress.com site ID")],
    show_context: Annotated[
        bool, typer.Option("--context", help="Print code context for file threats")
    ] = False,
) -> None:
    """List current Jetpack Scan threats."""
    scan = _run(JetpackScanServiceRemote().get_scan(site_id))

    if not scan.threats:
        console.print(f"No threats found for site [bold]{site_id}[/bold]")
        return

    table = Table(title=f"Threats for site {site_id} ({scan.state or 'unknown'})")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Signature", style="bold")
    table.add_column("File / Extension")
    table.add_column("Fix", style="cyan")
    table.add_column("First detected")

    for t in scan.threats:
        where = t.file_name or (f"{t.extension.type}: {t.extension.slug}" if t.extension else "-")
        table.add_row(
            str(t.id),
            t.signature,
            where,
            t.fixable.type.value if t.fixable else "-",
            t.first_detected.date().isoformat(),
        )

    console.print(table)

    if show_context:
        for t in scan.threats:
            if t.context is not None:
                console.print(f"\n[bold]{t.signature}[/bold] ({t.file_name or t.id})")
                _print_context(t)


# ---------------------------------------------------------------------------
# plugin
# ---------------------------------------------------------------------------


@plugin_app.command(name="info")
def plugin_info(
    slug: Annotated[str, typer.Argument(help="Plugin slug on WordPress.org")],
) -> None:
    """Show plugin directory metadata."""
    entry = _run(PluginDirectoryServiceRemote().get_plugin_information(slug))

    lines = [
        f"Slug:    {entry.slug}",
        f"Name:    {entry.name}",
        f"Version: {entry.version or '-'}",
        f"Author:  {entry.author or '-'}",
        f"Rating:  {entry.rating}/100",
    ]
    if entry.last_updated:
        lines.append(f"Updated: {entry.last_updated.isoformat()}")
    console.print(Panel("\n".join(lines), title=entry.name, expand=False))


# ---------------------------------------------------------------------------
# site
# ---------------------------------------------------------------------------


def _client_credentials() -> tuple[str, str]:
    settings = get_settings()
    if not settings.client_id or not settings.client_secret:
        raise ConfigurationError("WPKIT_CLIENT_ID and WPKIT_CLIENT_SECRET must be set")
    return settings.client_id, settings.client_secret


@site_app.command(name="create")
def site_create(
    url: Annotated[str, typer.Option("--url", help="Site address, e.g. example.wordpress.com")],
    title: Annotated[str, typer.Option("--title", help="Site title")],
    tagline: Annotated[str | None, typer.Option("--tagline", help="Site tagline")] = None,
    segment: Annotated[int, typer.Option("--segment", help="Site segment ID")] = 1,
    vertical: Annotated[str | None, typer.Option("--vertical", help="Site vertical ID")] = None,
    private: Annotated[bool, typer.Option("--private", help="Create a private site")] = False,
    lang: Annotated[str, typer.Option("--lang", help="Language ID")] = "en",
    validate: Annotated[
        bool, typer.Option("--validate/--no-validate", help="Have the server validate the request")
    ] = True,
) -> None:
    """Create a new WordPress.com site."""
    try:
        client_id, client_secret = _client_credentials()
    except ConfigurationError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from None

    request = SiteCreationRequest(
        segment_identifier=segment,
        vertical_identifier=vertical,
        title=title,
        tagline=tagline,
        site_url_string=url,
        is_public=not private,
        language_identifier=lang,
        should_validate=validate,
        client_identifier=client_id,
        client_secret=client_secret,
    )
    response = _run(WordPressComServiceRemote().create_wpcom_site(request))

    site = response.created_site
    console.print(
        Panel(
            f"ID:     {site.identifier}\nTitle:  {site.title}\nURL:    {site.url_string}\n"
            f"XML-RPC: {site.xmlrpc_string}",
            title="Site created" if response.success else "Site not created",
            expand=False,
        )
    )
