"""Infrastructure Layer: database access, repositories, and cross-cutting concerns.

Invariants:
    - Repository implementations satisfy core.repository_protocols.WeatherRepository
    - SQLAlchemy exceptions never cross into core types

Design Decisions:
    - In-memory and SQL repositories side by side: chosen per process by settings
"""
