"""
Task bridge for end-to-end test runners.

Exposes file, JSON/CSV persistence, log and status-counter operations as
named tasks that a sandboxed test runner can invoke.
"""

__version__ = "1.0.0"
