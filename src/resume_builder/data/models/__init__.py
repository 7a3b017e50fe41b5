"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- User: Account, password hash and bearer token
- Template: Administrator-managed style descriptors
- Resume: A user's structured resume content

All models inherit from the shared Base declarative class defined in data.db.
"""

from resume_builder.data.db import Base
from resume_builder.data.models.resume import Resume
from resume_builder.data.models.template import TEMPLATE_CATEGORIES, Template
from resume_builder.data.models.user import User

__all__ = ["Base", "Resume", "TEMPLATE_CATEGORIES", "Template", "User"]
