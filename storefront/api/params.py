"""Shared request parameter types"""

from typing import Annotated

from fastapi import Path

from storefront.schemas.base import INT_MAX, INT_MIN

# Bounded to the Integer column range
PathId = Annotated[int, Path(ge=INT_MIN, le=INT_MAX)]
