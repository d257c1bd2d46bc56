"""
Interactive capture-session simulation against the in-memory host.
"""

import asyncio
from typing import Optional, Set

from .utils.logging import setup_logging

setup_logging(verbose=False)

from .config import CaptureCapabilities, detect_capabilities  # noqa: E402
from .host import SimulatedHost  # noqa: E402
from .schemas import ResultCode  # noqa: E402
from .services import ServiceChannel, create_service_channel  # noqa: E402
from .services.channel import START_METHOD, STOP_METHOD  # noqa: E402
from .utils.threading import clear_main_event_loop, set_main_event_loop  # noqa: E402
from .utils.ui import (  # noqa: E402
    THEME,
    console,
    print_banner,
    print_capabilities,
    print_reply,
    print_session,
)

COMMANDS = {
    "start": "UI action: start sharing",
    "stop": "UI action: stop sharing",
    "allow": "Answer the consent dialog with a grant",
    "deny": "Answer the consent dialog with a denial",
    "cancel": "Dismiss the consent dialog",
    "kill": "Host tears the session down",
    "refuse": "Toggle foreground promotion refusal",
    "status": "Show session state",
    "quit": "Exit",
}


def print_help() -> None:
    for name, desc in COMMANDS.items():
        console.print(f"    [{THEME['accent']}]{name:<7}[/] [{THEME['muted']}]{desc}[/]")


async def _call(channel: ServiceChannel, method: str) -> None:
    reply = await channel.handle(method)
    print_reply(console, method, reply)


async def main(capabilities: Optional[CaptureCapabilities] = None) -> None:
    """
    Run the simulation loop.

    Args:
        capabilities: Platform capabilities, detected from the environment if omitted
    """
    set_main_event_loop(asyncio.get_running_loop())
    capabilities = capabilities or detect_capabilities()
    host = SimulatedHost()
    channel = create_service_channel(host, capabilities)
    calls: Set[asyncio.Task] = set()

    print_banner(console)
    print_capabilities(console, capabilities)
    console.print()
    print_help()

    try:
        while True:
            command = (
                await asyncio.to_thread(console.input, f"\n  [{THEME['accent']}]›[/] ")
            ).strip().lower()

            if command == "quit":
                break
            elif command in ("start", "stop"):
                method = START_METHOD if command == "start" else STOP_METHOD
                task = asyncio.create_task(_call(channel, method))
                calls.add(task)
                task.add_done_callback(calls.discard)
                await asyncio.sleep(0)
            elif command == "allow":
                if not channel.on_permission_result(ResultCode.OK, object()):
                    console.print(f"    [{THEME['muted']}]No dialog open[/]")
            elif command == "deny":
                if not channel.on_permission_result(ResultCode.FIRST_USER):
                    console.print(f"    [{THEME['muted']}]No dialog open[/]")
            elif command == "cancel":
                if not channel.on_permission_result(ResultCode.CANCELED):
                    console.print(f"    [{THEME['muted']}]No dialog open[/]")
            elif command == "kill":
                channel.session_manager.on_destroy()
            elif command == "refuse":
                host.refuse_promotion = not host.refuse_promotion
                console.print(
                    f"    [{THEME['muted']}]Promotion refusal[/] "
                    f"{'on' if host.refuse_promotion else 'off'}"
                )
            elif command == "status":
                print_session(
                    console, channel.session_manager.snapshot(), len(host.notifications)
                )
            elif command:
                print_help()
            await asyncio.sleep(0)
    finally:
        for task in calls:
            task.cancel()
        channel.session_manager.on_destroy()
        clear_main_event_loop()


def cli():
    """CLI entry point with argument parsing."""
    import argparse

    parser = argparse.ArgumentParser(
        description="WiFi Mirror - screen-capture session simulator",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show session lifecycle logs",
    )
    parser.add_argument(
        "--sdk",
        type=int,
        default=None,
        help="Platform API level to simulate (default: WIFI_MIRROR_SDK_INT or 34)",
    )

    args = parser.parse_args()

    if args.verbose:
        setup_logging(verbose=True)

    try:
        asyncio.run(main(detect_capabilities(args.sdk)))
    except (KeyboardInterrupt, EOFError):
        console.print(f"\n\n  [{THEME['muted']}]Goodbye[/]")


if __name__ == "__main__":
    cli()
