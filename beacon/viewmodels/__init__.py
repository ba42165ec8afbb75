"""ViewModel package for screen state and command surfaces.

Call context:
    ``beacon/app/composition.py`` builds the concrete view models; screens bind
    to their read-only ``StateFlow`` properties and call their commands.

Dependencies:
    Domain types and use cases only. Transport and persistence stay in
    adapters.
"""
