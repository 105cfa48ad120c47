"""Catalog handlers."""

from apps.catalog.handlers.parts import (
    add_part,
    delete_part,
    delete_part_endpoint,
    get_parts,
    get_parts_endpoint,
)
from apps.catalog.handlers.skills import (
    add_skill,
    delete_skill,
    delete_skill_endpoint,
    get_skills,
    get_skills_endpoint,
    seed_skills,
)

__all__ = [
    "add_part",
    "add_skill",
    "delete_part",
    "delete_part_endpoint",
    "delete_skill",
    "delete_skill_endpoint",
    "get_parts",
    "get_parts_endpoint",
    "get_skills",
    "get_skills_endpoint",
    "seed_skills",
]
