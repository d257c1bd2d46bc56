"""
Terminal output for the capture simulation.
"""

from rich.console import Console

from ...config import CaptureCapabilities
from ...schemas import ChannelReply, ReplyKind, SessionSnapshot, SessionState
from .theme import ICONS, THEME

STATE_STYLES = {
    SessionState.RUNNING: ("running", ICONS["running"]),
    SessionState.AWAITING_GRANT: ("awaiting", ICONS["running"]),
    SessionState.STARTING: ("awaiting", ICONS["running"]),
}


def print_banner(console: Console) -> None:
    """Display startup banner."""
    console.print()
    console.print(f"  [{THEME['border']}]╭{'─' * 44}╮[/]")
    console.print(
        f"  [{THEME['border']}]│[/]  [bold {THEME['running']}]◆[/] "
        f"[bold {THEME['text']}]WiFi Mirror capture shell[/]"
        f"{' ' * 13}[{THEME['border']}]│[/]"
    )
    console.print(f"  [{THEME['border']}]╰{'─' * 44}╯[/]")
    console.print()


def print_capabilities(console: Console, capabilities: CaptureCapabilities) -> None:
    """Display resolved platform capabilities inline."""

    def flag(value: bool) -> str:
        if value:
            return f"[{THEME['success']}]{ICONS['success']}[/]"
        return f"[{THEME['muted']}]{ICONS['idle']}[/]"

    console.print(
        f"    [{THEME['muted']}]API[/] [{THEME['text']}]{capabilities.sdk_int}[/]  "
        f"[{THEME['muted']}]upfront grant[/] {flag(capabilities.requires_upfront_grant)}  "
        f"[{THEME['muted']}]typed promotion[/] "
        f"{flag(capabilities.supports_typed_foreground_promotion)}  "
        f"[{THEME['muted']}]channels[/] {flag(capabilities.supports_notification_channels)}"
    )


def print_reply(console: Console, method: str, reply: ChannelReply) -> None:
    """Print the reply a UI action received."""
    if reply.kind == ReplyKind.SUCCESS:
        console.print(f"    [{THEME['success']}]{ICONS['success']}[/] {method}")
    elif reply.kind == ReplyKind.NOT_IMPLEMENTED:
        console.print(
            f"    [{THEME['warning']}]{ICONS['warning']}[/] {method} "
            f"[{THEME['muted']}]not implemented[/]"
        )
    else:
        console.print(
            f"    [{THEME['error']}]{ICONS['error']}[/] {method} "
            f"[{THEME['error']}]{reply.code}[/] [{THEME['muted']}]{reply.message}[/]"
        )


def print_session(console: Console, snapshot: SessionSnapshot, notifications: int) -> None:
    """Print the session state line."""
    style, icon = STATE_STYLES.get(snapshot.state, ("idle", ICONS["idle"]))
    category = snapshot.category.value if snapshot.category else "-"
    console.print(
        f"    [{THEME[style]}]{icon}[/] [{THEME['text']}]{snapshot.state.value}[/]  "
        f"[{THEME['muted']}]grant[/] {'yes' if snapshot.has_grant else 'no'}  "
        f"[{THEME['muted']}]foreground[/] {category}  "
        f"[{THEME['muted']}]notifications[/] {notifications}"
    )
