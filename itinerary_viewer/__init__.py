"""Top-level package for the itinerary viewer.

The viewer loads a personal travel itinerary from comma-delimited text,
turns it into ordered records and lets a user browse it day by day,
with links to an external map service.
"""
