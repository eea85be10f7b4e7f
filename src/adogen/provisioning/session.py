"""Provisioning session: the interactive loop that selects, authenticates, names and dispatches."""

import sys
from dataclasses import dataclass, field
from typing import Callable

import click

from adogen.auth.negotiator import AuthNegotiator
from adogen.catalog.extensions import ExtensionAdvisor
from adogen.catalog.template_catalog import TemplateCatalog
from adogen.console import ConsoleConfig, SessionConsole, new_session_id
from adogen.errors import (
    AuthFailure,
    CatalogMissing,
    TemplateNotFound,
    ValidationError,
)
from adogen.input_checks import check_project_name
from adogen.provisioning.request import build_request

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

TEMPLATE_RETRY_PROMPT = (
    "Would you like to try again or exit? "
    "(type 'retry' to try again or 'exit' to quit):"
)
PROJECT_NAME_RETRY_PROMPT = (
    "Do you want to try with a valid project name or exit? "
    "(type 'retry' to try again or 'exit' to quit):"
)
REPEAT_PROMPT = "Do you want to create another project? (yes/no): press enter to confirm"


@dataclass
class SessionDeps:
    """Injectable collaborators for the provisioning session."""

    catalog_factory: Callable[[], TemplateCatalog]
    extension_advisor: ExtensionAdvisor
    negotiator: AuthNegotiator
    project_service: object
    console_config: ConsoleConfig = field(default_factory=ConsoleConfig)
    name_checker: Callable[[str], bool] = check_project_name
    session_id_fn: Callable[[], str] = new_session_id


@dataclass
class _Selection:
    name: str
    folder: str


class ProvisioningSession:
    """Repeats template selection through dispatch until the user stops.

    Every iteration gets a fresh session id, catalog and credentials.
    """

    def __init__(self, deps: SessionDeps):
        self._deps = deps

    def run(self):
        try:
            while self._run_iteration():
                pass
        except KeyboardInterrupt:
            output = self._deps.console_config.output
            click.echo(file=output)
            click.echo("Interrupted.", file=output)
            sys.exit(EXIT_INTERRUPTED)
        except Exception as exc:
            output = self._deps.console_config.output
            click.echo(f"An error occurred: {exc}", file=output)
            click.echo("Exiting the application.", file=output)
            sys.exit(EXIT_FAILURE)

    def _run_iteration(self) -> bool:
        """Run one provisioning attempt. Returns True to loop again."""
        console = SessionConsole(self._deps.session_id_fn(), self._deps.console_config)

        selection = self._select_template(console)
        if selection is None:
            return True

        advisor = self._deps.extension_advisor
        extensions = advisor.discover(selection.folder)
        consent_granted = advisor.present_and_confirm(extensions, console)

        try:
            auth = self._deps.negotiator.negotiate(console)
        except ValidationError as exc:
            console.error(str(exc))
            return True
        except AuthFailure as exc:
            console.error(f"Error: {exc}")
            console.info("Exiting the application.")
            sys.exit(EXIT_FAILURE)

        project_name = self._ask_project_name(console)

        try:
            request = build_request(
                console.session_id, auth, project_name,
                selection.name, selection.folder,
                extensions=extensions, consent_granted=consent_granted,
            )
        except ValidationError:
            console.error("Validation error: All inputs must be provided. Exiting..")
            sys.exit(EXIT_FAILURE)

        self._dispatch(request, console)
        return self._ask_repeat(console)

    def _select_template(self, console):
        console.info("Template Details")
        catalog = self._deps.catalog_factory()
        try:
            groups = catalog.load()
        except CatalogMissing as exc:
            console.error(str(exc))
            sys.exit(EXIT_FAILURE)

        numbered = dict(catalog.list_selectable())
        number = 1
        for group in groups:
            console.echo(group.group_name)
            for template in group.templates:
                console.echo(f"  {number}. {template.name}")
                number += 1

        raw = console.ask("Enter the template number from the list of templates above:")
        try:
            name = numbered.get(int(raw))
        except ValueError:
            name = None
        if name is None:
            console.info("Invalid template number entered.")
            return None

        name = name.strip()
        try:
            folder, _requires_confirmation = catalog.resolve(name)
        except TemplateNotFound as exc:
            console.error(str(exc))
            console.retry_or_exit(TEMPLATE_RETRY_PROMPT, EXIT_SUCCESS)
            return None

        console.info(f"Selected template: {name}")
        return _Selection(name=name, folder=folder)

    def _ask_project_name(self, console):
        while True:
            project_name = console.ask("Enter the new project name:")
            if not project_name:
                console.error("Project name cannot be empty.")
                continue
            if not self._deps.name_checker(project_name):
                console.error("Validation error: Project name is not valid.")
                console.retry_or_exit(PROJECT_NAME_RETRY_PROMPT, EXIT_FAILURE)
                continue
            return project_name

    def _dispatch(self, request, console):
        console.echo(
            f"Creating project '{request.project_name}' in organization "
            f"'{request.organization_name}' using template from '{request.template_name}'..."
        )
        try:
            created = self._deps.project_service.create_environment(request)
        except Exception as exc:
            console.error(f"An error occurred while creating the project: {exc}")
            console.info("Exiting the application.")
            sys.exit(EXIT_FAILURE)
        if created:
            console.info("Project created successfully.", fg="green")
        else:
            console.error("Project creation failed.")

    @staticmethod
    def _ask_repeat(console):
        again = console.ask_yes_no(REPEAT_PROMPT)
        console.echo()
        if not again:
            console.info("Exiting the application.")
        return again
