"""Holiday definitions: common ones and those of Argentina, Austria, Australia, Belgium, Bulgaria and Brazil."""

__all__ = ["aa", "ar", "at", "au", "be", "bg", "br"]