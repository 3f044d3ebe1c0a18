"""ORM Models: SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is complete for create_all and Alembic
"""

from weather_api.models.weather import WeatherRecord  # noqa: F401
