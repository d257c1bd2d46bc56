from .main_loop import (
    call_on_main_loop,
    clear_main_event_loop,
    is_main_thread,
    set_main_event_loop,
)

__all__ = [
    "call_on_main_loop",
    "clear_main_event_loop",
    "is_main_thread",
    "set_main_event_loop",
]
