"""Rich tables for the three displayed lists.

The "#" column is the one-based index users pass to index-taking commands.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from studybook.domain.module import Module
from studybook.domain.person import Person
from studybook.domain.task import Task
from studybook.service_layer.logic import Logic
from studybook.service_layer.results import Listing


def _new_table(title: str) -> Table:
    table = Table(title=title, show_header=True, show_lines=False, pad_edge=False)
    table.add_column("#", justify="right", no_wrap=True)
    return table


def persons_table(persons: Sequence[Person]) -> Table:
    """Build a table of *persons* in display order."""
    table = _new_table("Persons")
    table.add_column("Name", style="bold")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Address")
    table.add_column("Tags", style="cyan")
    table.add_column("Remark", style="dim")
    for position, person in enumerate(persons, start=1):
        table.add_row(
            str(position),
            str(person.name),
            str(person.phone),
            str(person.email),
            str(person.address),
            ", ".join(sorted(tag.value for tag in person.tags)),
            str(person.remark),
        )
    return table


def modules_table(modules: Sequence[Module]) -> Table:
    """Build a table of *modules* in display order."""
    table = _new_table("Modules")
    table.add_column("Code", style="bold", no_wrap=True)
    table.add_column("Name")
    table.add_column("Credits", justify="right")
    for position, module in enumerate(modules, start=1):
        table.add_row(
            str(position),
            str(module.module_code),
            str(module.module_name),
            str(module.module_credit),
        )
    return table


def tasks_table(tasks: Sequence[Task]) -> Table:
    """Build a table of *tasks* in display order."""
    table = _new_table("Tasks")
    table.add_column("Module", style="bold", no_wrap=True)
    table.add_column("Description")
    table.add_column("Done", justify="center")
    table.add_column("Priority")
    table.add_column("Deadline", no_wrap=True)
    for position, task in enumerate(tasks, start=1):
        table.add_row(
            str(position),
            str(task.module.module_code),
            str(task.description),
            "x" if task.is_complete() else "",
            "" if task.priority_tag is None else str(task.priority_tag),
            "" if task.deadline_tag is None else str(task.deadline_tag),
        )
    return table


def render(console: Console, logic: Logic, listing: Listing) -> None:
    """Print the displayed list named by *listing*."""
    match listing:
        case Listing.PERSONS:
            console.print(persons_table(logic.filtered_persons))
        case Listing.MODULES:
            console.print(modules_table(logic.filtered_modules))
        case Listing.TASKS:
            console.print(tasks_table(logic.filtered_tasks))
