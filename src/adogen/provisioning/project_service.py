"""ProjectService: creates the demo project in Azure DevOps from a ProvisioningRequest."""

import json
import os
import time
from contextlib import closing
from typing import Callable

from adogen.config import GeneratorConfig
from adogen.console import ConsoleConfig, SessionConsole
from adogen.devops_client import EXTMGMT_BASE_URL, DevOpsClient
from adogen.errors import DevOpsApiError, ProvisioningFailure
from adogen.input_checks import extract_display_link
from adogen.provisioning.request import ProvisioningRequest
from adogen.template_renderer import render_string, render_template

SETTINGS_FILE_NAME = "ProjectSettings.json"
DEFAULT_PROCESS = "Agile"
CONFLICT = 409

_DONE_STATES = ("succeeded", "failed", "cancelled")


def read_project_settings(templates_dir, template_folder):
    """Return the template's ProjectSettings.json as a dict ({} when absent)."""
    path = os.path.join(templates_dir, template_folder, SETTINGS_FILE_NAME)
    if not os.path.isfile(path):
        return {}
    with open(path, encoding="utf-8-sig") as f:
        data = json.load(f)
    return data if isinstance(data, dict) else {}


class ProjectService:
    """Creates the project, waits for it, then installs consented extensions."""

    def __init__(self, config: GeneratorConfig, *, console_config=None,
                 client_factory: Callable = None, sleep_fn: Callable = None):
        self._config = config
        self._console_config = console_config or ConsoleConfig()
        self._client_factory = client_factory or DevOpsClient
        self._sleep_fn = sleep_fn or time.sleep

    def create_environment(self, request: ProvisioningRequest) -> bool:
        """Provision the project described by ``request``.

        Returns:
            True when the project exists and every requested extension
            install succeeded, False when Azure DevOps reported a failure.
        """
        console = SessionConsole(request.session_id, self._console_config)
        client = self._client_factory(
            request.access_token, request.auth_scheme,
            api_version=self._config.api_version,
            timeout=self._config.request_timeout,
        )
        with closing(client):
            try:
                self._create_project(client, request, console)
                self._install_extensions(client, request, console)
            except (DevOpsApiError, ProvisioningFailure) as exc:
                console.error(str(exc))
                return False
        return True

    def _description(self, request, settings):
        source = settings.get("Description")
        variables = {
            "project_name": request.project_name,
            "template_name": request.template_name,
            "organization_name": request.organization_name,
        }
        if source:
            return render_string(source, **variables)
        return render_template("project_description.j2", **variables)

    def _process_id(self, client, organization, process_name):
        processes = client.get(
            DevOpsClient.organization_url(organization, "_apis/process/processes"),
        )
        for process in (processes or {}).get("value", []):
            if process.get("name", "").lower() == process_name.lower():
                return process["id"]
        raise ProvisioningFailure(
            f"Process '{process_name}' is not available in organization '{organization}'."
        )

    def _create_project(self, client, request, console):
        settings = read_project_settings(self._config.templates_dir, request.template_folder)
        process_name = settings.get("Process") or DEFAULT_PROCESS
        organization = request.organization_name
        payload = {
            "name": request.project_name,
            "description": self._description(request, settings),
            "capabilities": {
                "versioncontrol": {"sourceControlType": "Git"},
                "processTemplate": {
                    "templateTypeId": self._process_id(client, organization, process_name),
                },
            },
        }
        operation = client.post(
            DevOpsClient.organization_url(organization, "_apis/projects"), payload,
        )
        console.info(f"Project '{request.project_name}' queued with the {process_name} process.")
        self._wait_for_operation(client, organization, operation or {})

    def _wait_for_operation(self, client, organization, operation):
        operation_id = operation.get("id")
        if not operation_id:
            raise ProvisioningFailure("Project creation did not return an operation id.")
        url = DevOpsClient.organization_url(organization, f"_apis/operations/{operation_id}")
        status = operation.get("status", "")
        for _ in range(self._config.poll_attempts):
            if status in _DONE_STATES:
                break
            self._sleep_fn(self._config.poll_interval)
            status = (client.get(url) or {}).get("status", "")
        if status != "succeeded":
            raise ProvisioningFailure(
                f"Project creation did not succeed (status: {status or 'unknown'})."
            )

    def _install_extensions(self, client, request, console):
        if not request.extensions_present:
            return
        if not request.consent_granted:
            console.info("Skipping extension installation: consent was not given.")
            return
        for entry in request.extensions:
            if not entry.installable:
                console.info(f"Install '{entry.name}' manually: {extract_display_link(entry.link)}")
                continue
            url = (
                f"{EXTMGMT_BASE_URL}/{request.organization_name}/_apis/extensionmanagement/"
                f"installedextensionsbyname/{entry.publisher_id}/{entry.extension_id}"
            )
            try:
                client.post(url, api_version=f"{self._config.api_version}-preview.1")
            except DevOpsApiError as exc:
                if exc.status_code != CONFLICT:
                    raise
                console.info(f"Extension '{entry.name}' is already installed.")
                continue
            console.info(f"Installed extension '{entry.name}'.")
