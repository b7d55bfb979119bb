"""Domain layer for fintrack application.

Services live in their own modules (``fintrack.domain.transaction`` and so on)
and are imported from there; the database layer imports the entities from this
package, so nothing here may import the services.
"""
