"""bike-stations.

This package persists bike-share stations in a relational database and looks
them up again by their internal identifier or by the identifier an upstream
feed assigned to them.

Core subpackages
----------------

- ``bike_stations.core``:

  - Settings and logging configuration.
  - Pydantic domain models (``Station`` and its value objects).
  - The SQLModel table entity, engine/session helpers and the generic
    persistence port used by repositories.

- ``bike_stations.station_core``:

  - The ``StationRepository`` contract and its SQL implementation, which
    rejects duplicate station ids and duplicate external station ids.

Typical workflow
----------------

1. Create an engine with ``bike_stations.core.database.create_engine``.
2. Create tables with ``create_all`` (tests/dev) and a session factory with
   ``create_sessionmaker``.
3. Build the repository with
   ``bike_stations.station_core.repos.sql.build_station_repository``.
4. ``add`` fully built ``Station`` aggregates and read them back with the
   ``find_*`` methods.
"""
