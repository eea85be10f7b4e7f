"""Load and render Jinja2 templates from a templates subpackage, or inline text."""

import importlib.resources

import jinja2


def render_template(template_file: str, /, *, package: str = "adogen", **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_file: Template filename (e.g. "project_description.j2")
        package: Package whose ``templates`` subpackage holds the file.
        **kwargs: Template variables. ``template_file`` is positional-only, so it may also
            be used as a variable name.

    Returns:
        The rendered template string.
    """
    templates = importlib.resources.files(f"{package}.templates")
    source = templates.joinpath(template_file).read_text(encoding="utf-8")
    return render_string(source, **kwargs)


def render_string(source: str, /, **kwargs) -> str:
    return jinja2.Template(source).render(**kwargs).strip()
