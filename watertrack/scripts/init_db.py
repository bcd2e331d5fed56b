# Recreates the database schema from scratch
from watertrack.db import Base, engine
from watertrack.models import User, Category, Device, Usage, Bill  # noqa: F401

Base.metadata.drop_all(engine)
Base.metadata.create_all(bind=engine)
print("Database schema created")
