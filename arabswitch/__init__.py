"""ArabSwitch — English ↔ Arabic keyboard layout converter for selected text."""

__version__ = "0.1.0"
