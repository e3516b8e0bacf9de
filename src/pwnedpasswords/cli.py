"""
CLI commands for Pwned Passwords range checks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import json
import os
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn
from rich.table import Table

from pwnedpasswords import __version__
from pwnedpasswords.client import create_client
from pwnedpasswords.exceptions import InvalidConfiguration, TransportFailure
from pwnedpasswords.models import PwnedPasswordsOptions, RiskLevel
from pwnedpasswords.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

console = Console()


def risk_color(risk: RiskLevel) -> str:
    """Get color for risk level."""
    colors = {
        RiskLevel.SAFE: "green",
        RiskLevel.LOW: "yellow",
        RiskLevel.MEDIUM: "orange3",
        RiskLevel.HIGH: "red",
        RiskLevel.CRITICAL: "bold red",
    }
    return colors.get(risk, "white")


def _fail(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__, prog_name="pwnedpasswords")
@click.option("--min-frequency", "-m", type=int, default=None,
              help="Minimum times seen to consider a password pwned")
@click.option("--padding/--no-padding", default=None,
              help="Ask the API to pad responses")
@click.option("--api-url", envvar="PWNED_PASSWORDS_API_URL", default=DEFAULT_BASE_URL,
              show_default=True, help="Range API base URL")
@click.option("--user-agent", envvar="PWNED_PASSWORDS_USER_AGENT", default=DEFAULT_USER_AGENT,
              show_default=True, help="User-Agent header")
@click.option("--timeout", type=float, default=DEFAULT_TIMEOUT, show_default=True,
              help="Request timeout in seconds")
@click.pass_context
def main(
    ctx: click.Context,
    min_frequency: int | None,
    padding: bool | None,
    api_url: str,
    user_agent: str,
    timeout: float,
) -> None:
    """Pwned Passwords - k-anonymity password breach checks.

    Only the first 5 characters of each password's SHA-1 hash are sent
    to the API. Passwords never leave your system.

    Defaults are read from PWNED_PASSWORDS_MIN_FREQUENCY and
    PWNED_PASSWORDS_ADD_PADDING.
    """
    try:
        options = PwnedPasswordsOptions.from_env()
        if min_frequency is not None:
            options = options.with_overrides(minimum_frequency_to_consider_pwned=min_frequency)
        if padding is not None:
            options = options.with_overrides(add_padding=padding)
    except InvalidConfiguration as e:
        _fail(str(e))

    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    ctx.obj["options"] = options
    ctx.obj["api_url"] = api_url
    ctx.obj["user_agent"] = user_agent
    ctx.obj["timeout"] = timeout


def _client_from_context(ctx: click.Context):
    options: PwnedPasswordsOptions = ctx.obj["options"]
    return create_client(
        minimum_frequency_to_consider_pwned=options.minimum_frequency_to_consider_pwned,
        add_padding=options.add_padding,
        base_url=ctx.obj["api_url"],
        user_agent=ctx.obj["user_agent"],
        timeout=ctx.obj["timeout"],
    )


def _print_result(result, json_output: bool) -> None:
    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2, default=str))
        return

    color = risk_color(result.risk_level)

    if not result.is_pwned:
        seen = (
            f"Seen {result.occurrences:,} times, below the configured threshold.\n\n"
            if result.occurrences else ""
        )
        console.print(Panel(
            f"[green]Good news![/green] This password is not considered pwned.\n\n"
            f"{seen}"
            f"Risk Level: [{color}]{result.risk_level.value.upper()}[/{color}]",
            title="Password Check Result"
        ))
    else:
        console.print(Panel(
            f"[red]Warning![/red] This password has been seen [bold]{result.occurrences:,}[/bold] times in data breaches!\n\n"
            f"Risk Level: [{color}]{result.risk_level.value.upper()}[/{color}]\n\n"
            f"{result.risk_description}",
            title="Password Check Result"
        ))


# =============================================================================
# Password Checking
# =============================================================================

@main.command("check")
@click.option("--password", "-p", help="Password to check (or prompts securely)")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def check_password(
    ctx: click.Context,
    password: str | None,
    json_output: bool,
) -> None:
    """Check if a password has been exposed in data breaches.

    Example:
        pwnedpasswords check
        pwnedpasswords --min-frequency 20 check -p hunter2
    """
    if password is None:
        password = click.prompt("Password to check", hide_input=True, default="", show_default=False)

    async def _check():
        async with _client_from_context(ctx) as client:
            return await client.check_password(password)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Checking password...", total=None)
            result = asyncio.run(_check())
    except TransportFailure as e:
        _fail(str(e))

    _print_result(result, json_output)


@main.command("hash")
@click.argument("sha1_hash")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def check_hash(
    ctx: click.Context,
    sha1_hash: str,
    json_output: bool,
) -> None:
    """Check a pre-computed SHA-1 hash.

    Example:
        pwnedpasswords hash 5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8
    """
    async def _check():
        async with _client_from_context(ctx) as client:
            return await client.check_password_hash(sha1_hash)

    try:
        result = asyncio.run(_check())
    except (TransportFailure, ValueError) as e:
        _fail(str(e))

    _print_result(result, json_output)


@main.command("batch")
@click.argument("passwords_file", type=click.Path(exists=True))
@click.option("--hashes", is_flag=True, help="File contains SHA-1 hashes instead of passwords")
@click.option("--output", "-o", type=click.Path(), help="Output file for results")
@click.pass_context
def check_batch(
    ctx: click.Context,
    passwords_file: str,
    hashes: bool,
    output: str | None,
) -> None:
    """Check multiple passwords/hashes from a file.

    File should contain one password or SHA-1 hash per line.

    Example:
        pwnedpasswords batch passwords.txt
        pwnedpasswords batch hashes.txt --hashes
    """
    items = Path(passwords_file).read_text().splitlines()
    items = [i.strip() for i in items if i.strip()]

    if not items:
        console.print("[yellow]No items found in file[/yellow]")
        return

    console.print(f"Checking {len(items)} {'hashes' if hashes else 'passwords'}...")

    async def _check_batch():
        results = []
        async with _client_from_context(ctx) as client:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TextColumn("{task.completed}/{task.total}"),
                console=console,
            ) as progress:
                task = progress.add_task("Checking...", total=len(items))

                for item in items:
                    if hashes:
                        result = await client.check_password_hash(item)
                    else:
                        result = await client.check_password(item)
                    results.append((item if hashes else "***", result))
                    progress.advance(task)

        return results

    try:
        results = asyncio.run(_check_batch())
    except (TransportFailure, ValueError) as e:
        _fail(str(e))

    # Summary
    pwned = [r for _, r in results if r.is_pwned]
    console.print(f"\n[bold]Results:[/bold] {len(pwned)}/{len(results)} passwords considered pwned")

    risk_counts = {}
    for _, r in results:
        risk_counts[r.risk_level] = risk_counts.get(r.risk_level, 0) + 1

    console.print("\n[bold]Risk Distribution:[/bold]")
    for risk in RiskLevel:
        count = risk_counts.get(risk, 0)
        color = risk_color(risk)
        console.print(f"  [{color}]{risk.value.upper()}[/{color}]: {count}")

    if output:
        output_data = [
            {"identifier": ident, "result": result.to_dict()}
            for ident, result in results
        ]
        Path(output).write_text(json.dumps(output_data, indent=2, default=str))
        console.print(f"\n[green]Results saved to {output}[/green]")


# =============================================================================
# Configuration
# =============================================================================

@main.command("config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show effective Pwned Passwords settings."""
    options: PwnedPasswordsOptions = ctx.obj["options"]

    table = Table(title="Pwned Passwords Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("API Base URL", ctx.obj["api_url"])
    table.add_row("User-Agent", ctx.obj["user_agent"])
    table.add_row("Timeout", f"{ctx.obj['timeout']}s")
    table.add_row("Minimum Frequency", str(options.minimum_frequency_to_consider_pwned))
    table.add_row(
        "Padding",
        "[green]Enabled[/green]" if options.add_padding else "[dim]Disabled[/dim]"
    )
    table.add_row(
        "Environment",
        ", ".join(
            name for name in ("PWNED_PASSWORDS_MIN_FREQUENCY", "PWNED_PASSWORDS_ADD_PADDING")
            if os.environ.get(name)
        ) or "[dim]none set[/dim]"
    )

    console.print(table)


if __name__ == "__main__":
    main()
