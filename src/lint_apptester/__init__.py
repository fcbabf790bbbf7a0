"""lint-apptester — directory-scoped style rules for app tester projects."""

__version__ = "0.1.0"
