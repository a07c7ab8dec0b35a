"""Core module - Session, configuration, retries and composition."""

from warden.core.browser import Browser
from warden.core.driver_factory import create_driver
from warden.core.services import Services

__all__ = ["Browser", "Services", "create_driver"]
