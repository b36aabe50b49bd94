"""
odds_calc/config.py - Validated Subcommand Arguments

argparse only splits the command line; these models own the value
constraints so the calculators never see a zero divisor or a bad gender.

Author: odds-calc contributors
License: MIT
"""

from typing import Union
from pydantic import BaseModel, Field, validator

from .harmonic import MAX_N
from .mortality import Gender


class StdArgs(BaseModel):
    """`std` subcommand."""
    to_convert: float = Field(..., description="std count (<20), percent (<100) or rarity (>=100)")


class ReimannZetaArgs(BaseModel):
    """`reimann-zeta` subcommand."""
    n: int = Field(..., ge=1, le=MAX_N, description="Size of the field")
    positions: int = Field(default=1, ge=1, description="Positions sharing the pick")


class LifeExpectancyArgs(BaseModel):
    """Birth year and table column shared by the mortality subcommands."""
    year: int = Field(..., ge=0, description="Year of birth")
    gender: Gender = Gender.MALE

    @validator('gender', pre=True)
    def parse_gender(cls, v: Union[str, Gender]) -> Gender:
        if isinstance(v, Gender):
            return v
        return Gender.parse(v)


def describe_validation_error(error: ValueError) -> str:
    """One-line summary of a pydantic ValidationError (or plain ValueError)."""
    errors = getattr(error, 'errors', None)
    if not callable(errors):
        return str(error)

    parts = []
    for item in errors():
        field = '.'.join(str(loc) for loc in item.get('loc', ()))
        msg = str(item.get('msg', ''))
        if msg.startswith('Value error, '):
            msg = msg[len('Value error, '):]
        parts.append(f"{field}: {msg}" if field else msg)
    return '; '.join(parts)
