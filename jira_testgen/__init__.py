"""Jira AI TestCase Generator."""

__version__ = "0.1.0"
