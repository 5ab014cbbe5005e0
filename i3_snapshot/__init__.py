"""
i3-snapshot

Save and restore which output and workspace every window lives on in i3/sway.
"""

__version__ = "0.2.0"
