"""Profiles module - saved generation settings.

Profiles are YAML files that specify:
- The root type name
- The output format
- An optional input format override
- Analysis options for the advanced formats
"""

from json_typegen.profiles.base import GenerationProfile
from json_typegen.profiles.loader import ProfileLoader, load_profile

__all__ = [
    "GenerationProfile",
    "ProfileLoader",
    "load_profile",
]
