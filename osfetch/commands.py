# osfetch/commands.py

import json
import logging

from rich.console import Console
from rich.table import Table

from osfetch.fetch import OsFetch
from osfetch.utils.errors import handle_errors

logger = logging.getLogger("osfetch")
console = Console()

# CLI name -> (label, Detection attribute)
FIELDS = {
    "os": ("Operating System", "operating_system"),
    "arch": ("Architecture", "architecture"),
    "kernel": ("Kernel", "kernel_version"),
    "version": ("Version", "os_version_number"),
    "release": ("Release", "release_name"),
    "full": ("Full Name", "fully_constructed_release_name"),
}


@handle_errors
def show(fetch: OsFetch):
    det = fetch.detection()
    table = Table(title="[cyan]osfetch[/cyan]", show_header=False)
    table.add_column("Field", style="bold magenta", no_wrap=True)
    table.add_column("Value", style="green")
    for label, attr in FIELDS.values():
        table.add_row(label, str(getattr(det, attr)) or "-")
    console.print(table)


@handle_errors
def get(fetch: OsFetch, field: str):
    if field not in FIELDS:
        raise ValueError(f"unknown field {field!r}")
    _, attr = FIELDS[field]
    value = str(getattr(fetch.detection(), attr))
    logger.debug(f"{field} = {value!r}")
    console.print(value, markup=False, highlight=False)


@handle_errors
def as_json(fetch: OsFetch):
    console.print_json(json.dumps(fetch.detection().to_dict()))
