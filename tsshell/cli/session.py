"""
Session State.

Mutable context shared by every command in one shell run.
"""

from dataclasses import dataclass


@dataclass
class SessionState:
    """
    Context selected by the user through session commands.

    Fields are plain attributes and are never validated on assignment;
    an empty database is accepted here and rejected by the server later.
    """

    database: str = ""
    retention_policy: str = ""
    precision: str = ""
    username: str = ""
    password: str = ""
