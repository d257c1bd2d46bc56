from .session_manager import CaptureSessionManager

__all__ = ["CaptureSessionManager"]
