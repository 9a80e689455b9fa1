"""
tsshell.

Interactive shell for a time-series database speaking the HTTP
query/write protocol.

- core/: Configuration, logging, exceptions
- cli/: Session, command dispatch, transport client, result rendering
"""
