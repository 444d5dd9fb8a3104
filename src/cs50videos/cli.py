"""Click CLI with commands: latest, tools."""

from __future__ import annotations

import json
import logging

import click

from cs50videos.logging import setup_logging
from cs50videos.settings import Settings
from cs50videos.tools import LATEST_VIDEOS_TOOL, build_tools, call_tool


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """cs50videos: latest CS50 uploads from YouTube."""
    ctx.ensure_object(dict)
    ctx.obj["settings"] = Settings()


@cli.command()
@click.option("--limit", default=5, type=int, show_default=True, help="Maximum number of videos to list.")
@click.option("--verbose", is_flag=True, help="Show info-level logs on stderr.")
@click.pass_context
def latest(ctx: click.Context, limit: int, verbose: bool) -> None:
    """Print the most recent CS50 uploads."""
    settings = ctx.obj["settings"]
    console_level = logging.INFO if verbose else logging.WARNING
    log = setup_logging(settings.log_dir, "cs50videos", console_level=console_level)
    tools = build_tools(settings, log)
    click.echo(call_tool(tools, LATEST_VIDEOS_TOOL, {"limit": limit}))


@cli.command("tools")
@click.pass_context
def list_tools(ctx: click.Context) -> None:
    """List registered tools and their parameter schemas."""
    tools = build_tools(ctx.obj["settings"])
    for tool in tools.values():
        click.echo(f"{tool.name}: {tool.description}")
        click.echo(f"  parameters: {json.dumps(tool.parameters)}")
