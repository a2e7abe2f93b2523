"""Location adapters"""
from .permission_gated_location_provider import PermissionGatedLocationProvider

__all__ = ['PermissionGatedLocationProvider']
