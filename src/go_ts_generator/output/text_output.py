"""
Human-readable text output formatter.
"""

from io import StringIO

from rich.console import Console
from rich.table import Table

from go_ts_generator.analyzer.type_registry import TypeRegistry
from go_ts_generator.models.declaration import TypeDeclaration
from go_ts_generator.output.formatters import BaseFormatter, register_formatter


@register_formatter("text")
class TextFormatter(BaseFormatter):
    """
    Format collected declarations as a Rich table.
    """

    def __init__(self, colorize: bool = True) -> None:
        """
        Initialize the text formatter.

        Args:
            colorize: Whether to use colors in output.
        """
        self.colorize = colorize

    def _flags(self, declaration: TypeDeclaration) -> str:
        flags = []
        if declaration.is_api_type:
            flags.append("api")
        if not declaration.is_exported:
            flags.append("unexported")
        return ", ".join(flags)

    def format(self, registry: TypeRegistry) -> str:
        """Format a registry as a text table."""
        output = StringIO()
        console = Console(file=output, force_terminal=self.colorize, width=120)

        if not len(registry):
            console.print("[yellow]No type declarations found.[/yellow]")
            return output.getvalue()

        table = Table(title=f"Go type declarations ({len(registry)})")
        table.add_column("Name", style="cyan")
        table.add_column("Kind")
        table.add_column("Fields", justify="right")
        table.add_column("Flags", style="dim")
        table.add_column("Endpoints")
        table.add_column("Location", style="dim")

        for declaration in registry:
            endpoints = "\n".join(
                f"{e.key} ({e.direction.value})" for e in declaration.endpoints
            )
            location = ""
            if declaration.file_path is not None:
                location = f"{declaration.file_path}:{declaration.line_number}"
            table.add_row(
                declaration.name,
                declaration.kind.value,
                str(len(declaration.fields)) if declaration.is_record else "-",
                self._flags(declaration),
                endpoints,
                location,
            )

        console.print(table)
        return output.getvalue()
