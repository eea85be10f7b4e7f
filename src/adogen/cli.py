"""Click entry point for the adogen interactive generator."""

import click

from adogen.auth.auth_service import AuthService
from adogen.auth.negotiator import AuthNegotiator
from adogen.catalog.extensions import ExtensionAdvisor
from adogen.catalog.template_catalog import TemplateCatalog
from adogen.config import read_generator_config
from adogen.console import ConsoleConfig
from adogen.errors import ConfigError
from adogen.provisioning.project_service import ProjectService
from adogen.provisioning.session import ProvisioningSession, SessionDeps

WELCOME = (
    "Welcome to Azure DevOps Demo Generator! "
    "This tool will help you generate a demo environment for Azure DevOps."
)


def build_session_deps(config, console_config=None):
    """Wire the real collaborators for a session."""
    console_config = console_config or ConsoleConfig()
    return SessionDeps(
        catalog_factory=lambda: TemplateCatalog(config.templates_dir),
        extension_advisor=ExtensionAdvisor(config.templates_dir),
        negotiator=AuthNegotiator(lambda console: AuthService(config, console)),
        project_service=ProjectService(config, console_config=console_config),
        console_config=console_config,
    )


@click.command()
def main():
    """adogen - generate Azure DevOps demo projects from templates."""
    try:
        config = read_generator_config()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(WELCOME)
    session = ProvisioningSession(build_session_deps(config))
    session.run()
