"""Holiday calendars, business-day arithmetic and regional holiday definitions."""

__version__ = "2.0.0"
__all__ = ["business", "calendar", "holiday", "regions", "timeutil"]