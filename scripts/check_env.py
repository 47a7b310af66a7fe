"""Script to check monitoring configuration and agent availability."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.core.config import Settings
from src.monitoring.factory import build_facade
from src.utils.logging import level_from_name, setup_logging
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

console = Console()


def main():
    """Check and display monitoring configuration."""
    console.print(Panel.fit("Monitoring Configuration Check", style="bold blue"))

    try:
        settings = Settings.from_env()
        setup_logging(level=level_from_name(settings.log_level), log_file=settings.log_file)

        table = Table(title="Main Configuration")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="magenta")

        table.add_row("Environment", settings.environment)
        table.add_row("Agent Backend", settings.agent_backend.value)
        table.add_row("Agent Module", settings.agent_module)
        table.add_row(
            "Register Timeout",
            f"{settings.agent_register_timeout}s" if settings.agent_register_timeout is not None else "Agent default",
        )
        table.add_row("Log Level", settings.log_level)
        table.add_row("Log File", settings.log_file or "Not set")

        console.print(table)

        facade = build_facade(settings)
        enabled = facade.is_enabled()

        agent_table = Table(title="Agent")
        agent_table.add_column("Check", style="cyan")
        agent_table.add_column("Value", style="magenta")
        agent_table.add_column("Status", style="yellow")
        agent_table.add_row("Implementation", facade.agent.name, "OK")
        agent_table.add_row("Loaded", "Yes" if enabled else "No", "OK" if enabled else "WARN")

        console.print(agent_table)

        if not enabled:
            console.print("[yellow]Agent not loaded: all monitoring calls will be no-ops[/yellow]")
        return 0

    except Exception as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
