from .coordinator import MEDIA_PROJECTION_REQUEST_CODE, PermissionCoordinator

__all__ = ["MEDIA_PROJECTION_REQUEST_CODE", "PermissionCoordinator"]
