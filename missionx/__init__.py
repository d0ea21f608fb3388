"""Mission control workbench: scenarios, alert rules, track simulation and debriefs."""

__version__ = "0.1.0"