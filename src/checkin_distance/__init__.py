"""Travel metrics for geolocation check-in logs."""

__version__ = "0.1.0"
