"""Numbered-option menu used for picking from a dynamic list."""

import sys

from adogen.console import PROMPT_MARKER, SessionConsole


def _display_options(prompt, options, console):
    console.info(prompt)
    for i, option in enumerate(options):
        console.echo(f"  {i + 1}) {option}")


def _parse_choice(raw_input, option_count):
    raw_input = raw_input.strip()
    if raw_input.isdigit() and 1 <= int(raw_input) <= option_count:
        return int(raw_input)
    return None


def get_user_choice(prompt, options, console: SessionConsole):
    """Display numbered options and return the user's selection.

    Args:
        prompt: Header text displayed above the options.
        options: List of option label strings.
        console: SessionConsole used for output and input.

    Returns:
        1-based index of the selected option.

    Raises:
        SystemExit(0): On EOF (e.g. piped input closed).
    """
    _display_options(prompt, options, console)
    prompt_text = f"Enter your choice (1-{len(options)})"

    while True:
        try:
            choice = console.config.input_fn(f"{prompt_text}{PROMPT_MARKER}")
        except EOFError:
            console.echo()
            console.echo("Input closed. Exiting.")
            sys.exit(0)
        parsed = _parse_choice(choice, len(options))
        if parsed is not None:
            return parsed
        console.error(
            f"Invalid choice. Please enter a number between 1 and {len(options)}."
        )
