"""Gateway adapters - Remote API implementations."""

from .http import HttpImageUploadGateway, HttpRegistrationGateway

__all__ = ["HttpImageUploadGateway", "HttpRegistrationGateway"]
