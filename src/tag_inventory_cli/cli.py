# src/tag_inventory_cli/cli.py
"""
CLI implementation using click and rich.
Supports both a positional region argument and an interactive prompt mode.
"""

import logging
import sys
import threading
from typing import Optional

import click
import questionary
from rich.progress import Progress, SpinnerColumn, TextColumn

from tag_inventory_cli.adapters.aws.aws_provider import AWSProvider
from tag_inventory_cli.config import (
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
    REQUEST_TIMEOUT_SECONDS,
)
from tag_inventory_cli.console import console, err_console, setup_logging
from tag_inventory_cli.core.errors import Cancelled, InventoryError
from tag_inventory_cli.core.models import InventoryResult, SkipPolicy
from tag_inventory_cli.utils.formatters import format_as_csv, format_as_json, format_as_table
from tag_inventory_cli.utils.utility import generate_filename


def display_summary(result: InventoryResult) -> None:
    """Prints the resource table, followed by a warning when records were skipped."""
    console.print(format_as_table(result.records, title=f"Tagged resources in {result.region}"))
    console.print(
        f"[info]{len(result.records)} resource(s) across {result.pages_fetched} page(s).[/]"
    )
    warn_if_incomplete(result)


def warn_if_incomplete(result: InventoryResult) -> None:
    if result.complete:
        return
    err_console.print(
        f"[warning]Warning:[/] {len(result.skipped)} resource(s) could not be classified "
        "and are missing from this listing:"
    )
    for skipped in result.skipped:
        err_console.print(f"  [dim]- {skipped.arn or '<no ARN>'}: {skipped.reason}[/]")


def run_interactive_prompts(default_region: str):
    """Wraps questionary prompts for interactive mode."""
    region = questionary.text("AWS region:", default=default_region).ask()
    if not region:
        return None, None, None

    fmt = questionary.select(
        "Output format?",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
    ).ask()

    output = None
    if fmt and fmt != "table":
        output = questionary.text(
            "Output file (leave blank for console):",
            default=generate_filename(fmt, region),
        ).ask()

    return region, fmt, output or None


def fetch_inventory(
    provider: AWSProvider,
    policy: SkipPolicy,
    timeout: Optional[float],
) -> InventoryResult:
    cancel_event = threading.Event()
    timer = None
    if timeout:
        timer = threading.Timer(timeout, cancel_event.set)
        timer.daemon = True
        timer.start()

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=err_console,
            transient=True,
        ) as progress:
            task = progress.add_task(f"Listing tagged resources in {provider.region}...", total=None)

            def progress_update(pages, records):
                progress.update(task, description=f"Fetched {pages} page(s), {records} resource(s)...")

            return provider.list_resources(
                policy=policy,
                cancel_event=cancel_event,
                progress_callback=progress_update,
            )
    finally:
        if timer is not None:
            timer.cancel()


@click.command()
@click.argument("region", required=False)
@click.option("--format", "fmt", type=click.Choice(OUTPUT_FORMATS), default=DEFAULT_OUTPUT_FORMAT, help="Output format.")
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True), help="Save json/csv output to this file.")
@click.option("--strict", is_flag=True, help="Abort on the first resource whose ARN cannot be classified.")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=REQUEST_TIMEOUT_SECONDS, help="Cancel the listing after this many seconds.")
@click.option("--interactive", "-i", is_flag=True, help="Run in interactive prompt mode.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(region, fmt, output, strict, timeout, interactive, verbose):
    """List tagged AWS resources in REGION, grouped by service."""
    logger = setup_logging(logging.DEBUG) if verbose else setup_logging()

    if interactive:
        region, fmt, output = run_interactive_prompts(region or "us-east-1")
        if region is None or fmt is None:
            err_console.print("[warning]Operation cancelled.[/]")
            sys.exit(1)
    elif not region:
        raise click.UsageError("Missing argument 'REGION' (e.g. us-east-1).")

    if output and fmt == "table":
        raise click.UsageError("--output requires --format json or csv.")

    provider = AWSProvider(region=region)
    if not provider.validate_credentials():
        err_console.print("[error]Error:[/] Invalid or missing AWS credentials.")
        err_console.print("[dim]Please ensure your environment variables or local config files are set up properly.[/]")
        sys.exit(1)

    policy = SkipPolicy.STRICT if strict else SkipPolicy.SKIP
    logger.debug("Listing %s for account %s (policy=%s)", region, provider.get_account_id(), policy.value)

    try:
        result = fetch_inventory(provider, policy, timeout)
    except Cancelled as e:
        err_console.print(f"[error]Cancelled:[/] {e}")
        sys.exit(1)
    except InventoryError as e:
        err_console.print(f"[error]Error:[/] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        err_console.print("\n[warning]Operation cancelled by user.[/]")
        sys.exit(1)

    if fmt == "table":
        display_summary(result)
        return

    content = format_as_json(result) if fmt == "json" else format_as_csv(result.records)
    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            err_console.print(f"[error]Error saving file:[/] {e}")
            sys.exit(1)
        err_console.print(f"[success]Report saved to {output}[/]")
    else:
        click.echo(content, nl=not content.endswith("\n"))
    warn_if_incomplete(result)


def main():
    cli()


if __name__ == "__main__":
    main()
