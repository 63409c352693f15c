"""ORM Models — SQLAlchemy declarative models.

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all()
"""

from task_api.models.task import Task  # noqa: F401
