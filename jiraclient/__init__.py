"""Client library for parts of the Jira REST, Agile and Service Desk APIs."""

__version__ = "0.1.0"