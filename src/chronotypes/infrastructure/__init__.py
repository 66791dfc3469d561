"""Infrastructure layer — adapters over the date/time value libraries.

This layer depends on stdlib and third-party libs (Babel, tzdata via zoneinfo).
It may use domain predicates but must never import from services, commands,
or output.
"""
