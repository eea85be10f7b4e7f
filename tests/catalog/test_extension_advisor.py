"""Tests for catalog.extensions — manifest discovery and two-stage consent."""

import os

import pytest

from adogen.catalog.extensions import ExtensionAdvisor, ExtensionEntry
from scripted_io import ScriptedIO
from template_tree import write_json, write_template_tree


def _entry(name="Ext"):
    return ExtensionEntry(
        name=name,
        link="<a href='https://example.com/ext'>Ext</a>",
        license_link="https://example.com/license",
    )


@pytest.mark.unit
class TestDiscover:

    def test_reads_extensions_from_manifest(self, tmp_path):
        advisor = ExtensionAdvisor(write_template_tree(tmp_path))
        entries = advisor.discover("kanban-template")
        assert len(entries) == 1
        assert entries[0].name == "Work Item Visualization"
        assert entries[0].publisher_id == "ms-devlabs"
        assert entries[0].installable is True

    def test_no_manifest_gives_empty_sequence(self, tmp_path):
        advisor = ExtensionAdvisor(write_template_tree(tmp_path))
        assert advisor.discover("scrum-template") == ()

    def test_manifest_without_extensions_key_gives_empty_sequence(self, tmp_path):
        templates_dir = write_template_tree(tmp_path)
        write_json(os.path.join(templates_dir, "scrum-template", "Extensions.json"), {})
        assert ExtensionAdvisor(templates_dir).discover("scrum-template") == ()

    def test_entry_without_ids_is_not_installable(self):
        assert _entry().installable is False


@pytest.mark.unit
class TestPresentAndConfirm:

    def test_empty_entries_need_no_consent_and_do_not_prompt(self, tmp_path):
        scripted = ScriptedIO()
        assert ExtensionAdvisor(str(tmp_path)).present_and_confirm((), scripted.console()) is False
        assert scripted.prompts == []

    def test_displays_name_and_resolved_links(self, tmp_path):
        scripted = ScriptedIO(answers=["", ""])
        ExtensionAdvisor(str(tmp_path)).present_and_confirm((_entry("Pipelines"),), scripted.console())
        assert "Extension Name: Pipelines" in scripted.text
        assert "Link: https://example.com/ext" in scripted.text
        assert "License: https://example.com/license" in scripted.text

    @pytest.mark.parametrize("install,license_answer", [
        ("", ""), ("yes", "y"), ("Y", "YES"),
    ])
    def test_both_yes_grants_consent(self, tmp_path, install, license_answer):
        scripted = ScriptedIO(answers=[install, license_answer])
        result = ExtensionAdvisor(str(tmp_path)).present_and_confirm((_entry(),), scripted.console())
        assert result is True
        assert "Confirmed Extension installation" in scripted.text

    def test_declining_installation_skips_license_question(self, tmp_path):
        scripted = ScriptedIO(answers=["no", "yes"])
        result = ExtensionAdvisor(str(tmp_path)).present_and_confirm((_entry(),), scripted.console())
        assert result is False
        assert scripted.remaining_answers == ["yes"]
        assert "Extension installation is not confirmed." in scripted.text

    def test_declining_license_denies_consent(self, tmp_path):
        scripted = ScriptedIO(answers=["", "no"])
        result = ExtensionAdvisor(str(tmp_path)).present_and_confirm((_entry(),), scripted.console())
        assert result is False
        assert "Agreed for license?" in scripted.text
