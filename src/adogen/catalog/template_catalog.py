"""Template catalog: loads grouped templates from TemplateSetting.json and resolves them."""

import json
import os
from dataclasses import dataclass

from adogen.errors import CatalogMissing, FolderMissing, TemplateNotFound

INDEX_FILE_NAME = "TemplateSetting.json"
EXTENSIONS_FILE_NAME = "Extensions.json"


@dataclass(frozen=True)
class TemplateEntry:
    name: str
    template_folder: str
    requires_extension_confirmation: bool = False


@dataclass(frozen=True)
class TemplateGroup:
    group_name: str
    templates: tuple[TemplateEntry, ...]


def _parse_entry(raw):
    return TemplateEntry(
        name=str(raw.get("Name") or "").strip(),
        template_folder=str(raw.get("TemplateFolder") or "").strip(),
        requires_extension_confirmation=bool(raw.get("RequiresExtensionConfirmation", False)),
    )


def _parse_group(raw):
    templates = raw.get("Template") or []
    return TemplateGroup(
        group_name=str(raw.get("Groups") or ""),
        templates=tuple(_parse_entry(t) for t in templates if isinstance(t, dict)),
    )


class TemplateCatalog:
    """Read-only index of the templates available under ``templates_dir``."""

    def __init__(self, templates_dir: str):
        self._templates_dir = templates_dir
        self._groups: tuple[TemplateGroup, ...] = ()

    @property
    def index_file(self) -> str:
        return os.path.join(self._templates_dir, INDEX_FILE_NAME)

    def folder_path(self, template_folder: str) -> str:
        return os.path.join(self._templates_dir, template_folder)

    def load(self) -> tuple[TemplateGroup, ...]:
        """Read the template index.

        Raises:
            CatalogMissing: If the index file is absent or lists no templates.
        """
        if not os.path.isfile(self.index_file):
            raise CatalogMissing(f"{INDEX_FILE_NAME} file not found.")
        with open(self.index_file, encoding="utf-8-sig") as f:
            data = json.load(f)
        groups = data.get("GroupwiseTemplates") if isinstance(data, dict) else None
        if not isinstance(groups, list):
            raise CatalogMissing("No templates found.")
        self._groups = tuple(_parse_group(g) for g in groups if isinstance(g, dict))
        return self._groups

    def list_selectable(self) -> list[tuple[int, str]]:
        """Number every template 1..N across groups, in file order."""
        names = [t.name for group in self._groups for t in group.templates]
        return list(enumerate(names, start=1))

    def _find(self, name):
        wanted = name.strip().lower()
        for group in self._groups:
            for template in group.templates:
                if template.name.lower() == wanted:
                    return template
        return None

    def resolve(self, name: str) -> tuple[str, bool]:
        """Find a template by name (case-insensitive) and check its folder.

        Returns:
            (template_folder, requires_confirmation)

        Raises:
            TemplateNotFound: If no template has this name.
            FolderMissing: If the template exists but its folder does not.
        """
        template = self._find(name)
        if template is None:
            raise TemplateNotFound(f"Template '{name}' not found in the list.")
        folder = self.folder_path(template.template_folder)
        if not template.template_folder or not os.path.isdir(folder):
            raise FolderMissing(f"Template '{name}' is not found.")
        has_manifest = os.path.isfile(os.path.join(folder, EXTENSIONS_FILE_NAME))
        return template.template_folder, template.requires_extension_confirmation or has_manifest
