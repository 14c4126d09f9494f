"""Feature packages: catalog lookup and file tagging."""
