"""surf-omnibar: command resolver for the surf browser's URL prompt."""

__version__ = "0.1.0"
