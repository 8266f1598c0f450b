"""Confirmation capability passed to destructive operations."""

from typing import Callable

from catalog_manager.exceptions import ConfirmationRequired

# Receives the prompt, returns True to go ahead
Confirm = Callable[[str], bool]


def always_confirm(prompt: str) -> bool:
    """Accept every prompt."""
    return True


def confirm_from_flag(confirmed: bool) -> Confirm:
    """Build a confirmer from a flag sent by the client.

    Without the flag the prompt is raised back so the client can ask the user.
    """

    def _confirm(prompt: str) -> bool:
        if not confirmed:
            raise ConfirmationRequired(prompt)
        return True

    return _confirm
