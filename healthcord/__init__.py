"""healthcord: Discord notifications for endpoint health transitions."""

__version__ = "0.1.0"
