"""CLI command modules for taskcli.

Commands:
- add, list, update, status, delete: task commands
- config: show or create configuration
"""
