from .service_channel import CHANNEL_NAME, START_METHOD, STOP_METHOD, ServiceChannel

__all__ = ["CHANNEL_NAME", "START_METHOD", "STOP_METHOD", "ServiceChannel"]
