# FILE: ownshot/models/__init__.py
"""
Pydantic models for options records and request/response validation
"""
from ownshot.models.common import *
from ownshot.models.generic import *
from ownshot.models.interior import *
from ownshot.models.product import *
from ownshot.models.food import *
from ownshot.models.automotive import *
from ownshot.models.enhance import *
