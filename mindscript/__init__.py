"""Mind-Script backend: users, tasks, projects and reminders over a REST API."""

__version__ = "1.0.0"
