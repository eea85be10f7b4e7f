"""Helpers that lay out a Templates directory on disk for tests."""

import json
import os

DEFAULT_GROUPS = [
    {
        "Groups": "Agile",
        "Template": [
            {"Name": "Scrum", "TemplateFolder": "scrum-template"},
            {"Name": "Missing Folder", "TemplateFolder": "missing-template"},
        ],
    },
    {
        "Groups": "Extensions",
        "Template": [
            {"Name": "Kanban Board", "TemplateFolder": "kanban-template"},
        ],
    },
]

DEFAULT_EXTENSIONS = [
    {
        "extensionName": "Work Item Visualization",
        "link": "<a href='https://marketplace.visualstudio.com/items?itemName=ms.vss-wiv' target='_blank'>Work Item Visualization</a>",
        "License": "<a href=&quot;https://marketplace.visualstudio.com/license&quot;>License Terms</a>",
        "PublisherId": "ms-devlabs",
        "ExtensionId": "wiv",
    },
]


def write_json(path, data):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f)


def write_template_tree(root, groups=None, folders=("scrum-template", "kanban-template"),
                        extensions=None):
    """Create ``root``/Templates with an index, folders, and one extension manifest.

    Returns:
        Path of the Templates directory.
    """
    templates_dir = os.path.join(str(root), "Templates")
    os.makedirs(templates_dir, exist_ok=True)
    write_json(
        os.path.join(templates_dir, "TemplateSetting.json"),
        {"GroupwiseTemplates": DEFAULT_GROUPS if groups is None else groups},
    )
    for folder in folders:
        os.makedirs(os.path.join(templates_dir, folder), exist_ok=True)
    if "kanban-template" in folders:
        write_json(
            os.path.join(templates_dir, "kanban-template", "Extensions.json"),
            {"Extensions": DEFAULT_EXTENSIONS if extensions is None else extensions},
        )
    return templates_dir
