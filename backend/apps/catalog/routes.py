"""Catalog routes - parts and skills libraries."""

from fastapi import APIRouter

from apps.catalog.handlers import (
    add_part,
    add_skill,
    delete_part_endpoint,
    delete_skill_endpoint,
    get_parts_endpoint,
    get_skills_endpoint,
    seed_skills,
)
from responses import ActionResult

router = APIRouter(prefix="/catalog", tags=["Catalog"])

# Parts
router.get("/parts", response_model=ActionResult)(get_parts_endpoint)
router.post("/parts", response_model=ActionResult)(add_part)
router.delete("/parts/{item_id}", response_model=ActionResult)(delete_part_endpoint)

# Skills
router.get("/skills", response_model=ActionResult)(get_skills_endpoint)
router.post("/skills", response_model=ActionResult)(add_skill)
router.post("/skills/seed", response_model=ActionResult)(seed_skills)
router.delete("/skills/{item_id}", response_model=ActionResult)(delete_skill_endpoint)
