"""Pre-flight checks run before the template is cloned.

Nothing here is fatal: each problem becomes a warning string so the user
sees it up front, and the stage that actually needs the missing piece
reports the real failure.
"""

from __future__ import annotations

import shutil

import httpx
from rich.markup import escape
from rich.panel import Panel

from .config import Config
from .models import GenerationRequest
from .utils import console, print_warning


def missing_executables(config: Config, request: GenerationRequest) -> list[str]:
    """Return the required executables that are not on ``PATH``."""
    required = [config.commands.git, request.package_manager.value]
    if config.commands.rename:
        required.append(config.commands.rename[0])
    if request.install_pods and config.commands.pods:
        required.append(config.commands.pods[0])
    return [exe for exe in dict.fromkeys(required) if shutil.which(exe) is None]


async def check_template_reachable(
    url: str,
    timeout: float = 5.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    """Probe an HTTP(S) template URL with a ``HEAD`` request.

    Non-HTTP locations (ssh, local paths) are not probed and count as
    reachable.
    """
    if not url.startswith(("http://", "https://")):
        return True

    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=transport,
        ) as client:
            response = await client.head(url)
    except httpx.HTTPError:
        return False
    return response.status_code < 400


async def run_preflight(
    config: Config,
    request: GenerationRequest,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[str]:
    """Run every check and print the outcome.

    Returns:
        The warning messages, empty when everything looks fine.
    """
    console.print(Panel("[bold]Running pre-flight checks...[/bold]", style="cyan"))
    warnings: list[str] = []

    if request.target_path.exists():
        warnings.append(f"Target path already exists: {request.target_path}")
    else:
        console.print("  [green]+[/green] Target path is free")

    missing = missing_executables(config, request)
    if missing:
        warnings.append(f"Executables not found on PATH: {', '.join(missing)}")
    else:
        console.print("  [green]+[/green] Required tools found")

    if await check_template_reachable(
        config.template_url, timeout=config.preflight_timeout, transport=transport
    ):
        console.print("  [green]+[/green] Template repository reachable")
    else:
        warnings.append(f"Template repository not reachable: {config.template_url}")

    for message in warnings:
        print_warning(f"  {escape(message)}")
    return warnings
