"""Scroll-gesture inventory helper."""

from invscroll.app.screen_helper import ContainerScreenHelper

__all__ = ["ContainerScreenHelper"]
