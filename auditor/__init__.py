"""anchor-audit: tab-napping check for cross-origin ``target=_blank`` links."""

__version__ = "0.1.0"
