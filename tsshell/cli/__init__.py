"""
Interactive Shell Pipeline.

Session state, command dispatch, HTTP transport, and result rendering
for the time-series database shell.

Architecture:
- InteractiveShell reads one line at a time (Rich console input)
- CommandDispatcher classifies the line and mutates SessionState
  or calls TransportClient
- ResultRenderer decodes query responses into tables

Usage:
    python cli.py --host 127.0.0.1 --port 8086
"""
