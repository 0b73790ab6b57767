"""GitHub and Jira community connectors for a reporting platform."""

__version__ = "0.1.0"
