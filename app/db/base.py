# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here guarantees
# Base.metadata knows every table before create_all() runs.

from .base_class import Base

from .models.user_models import User
from .models.topic_models import Topic
from .models.generation_models import Generation, GenerationType
