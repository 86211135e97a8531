"""loginprefs — local account, session and input validation library."""

__version__ = "0.1.0"
