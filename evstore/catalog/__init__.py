"""
Vehicle catalog package.

Responsibilities:
- Parse the vehicle-spec CSV into immutable ``VehicleSpec`` records.
- Skip malformed rows without aborting the load.
- Expose the loaded records as a read-only ``Catalog``.
"""
