"""Extension advisor: lists a template's required extensions and collects consent."""

import json
import os
from dataclasses import dataclass

from adogen.catalog.template_catalog import EXTENSIONS_FILE_NAME
from adogen.console import SessionConsole
from adogen.input_checks import extract_display_link


@dataclass(frozen=True)
class ExtensionEntry:
    name: str
    link: str
    license_link: str
    publisher_id: str = ""
    extension_id: str = ""

    @property
    def installable(self) -> bool:
        return bool(self.publisher_id and self.extension_id)


def _parse_extension(raw):
    return ExtensionEntry(
        name=str(raw.get("extensionName") or ""),
        link=str(raw.get("link") or ""),
        license_link=str(raw.get("License") or ""),
        publisher_id=str(raw.get("PublisherId") or ""),
        extension_id=str(raw.get("ExtensionId") or ""),
    )


class ExtensionAdvisor:

    def __init__(self, templates_dir: str):
        self._templates_dir = templates_dir

    def manifest_path(self, template_folder: str) -> str:
        return os.path.join(self._templates_dir, template_folder, EXTENSIONS_FILE_NAME)

    def discover(self, template_folder: str) -> tuple[ExtensionEntry, ...]:
        """Return the extensions listed for a template folder, or () without a manifest."""
        path = self.manifest_path(template_folder)
        if not os.path.isfile(path):
            return ()
        with open(path, encoding="utf-8-sig") as f:
            data = json.load(f)
        extensions = data.get("Extensions") if isinstance(data, dict) else None
        if not isinstance(extensions, list):
            return ()
        return tuple(_parse_extension(e) for e in extensions if isinstance(e, dict))

    def present_and_confirm(self, entries, console: SessionConsole) -> bool:
        """Show the extensions and ask for installation and license consent.

        Returns True only when both questions are answered yes. An empty
        ``entries`` returns False without prompting.
        """
        if not entries:
            return False

        for entry in entries:
            console.echo(f"Extension Name: {entry.name}")
            console.echo(f"Link: {extract_display_link(entry.link)}")
            console.echo(f"License: {extract_display_link(entry.license_link)}")
            console.echo()

        if not console.ask_yes_no(
            "Do you want to proceed with this extension? (yes/No): press enter to confirm"
        ):
            console.info("Extension installation is not confirmed.")
            return False
        if not console.ask_yes_no(
            "Agreed for license? (yes/no): press enter to confirm", fg="yellow"
        ):
            console.info("License agreement is not confirmed.")
            return False
        console.info("Confirmed Extension installation")
        return True
