"""Date, day-count and root-finding helpers."""
