#!/usr/bin/env python3
"""Score a learner's skills against a catalog role"""
import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from readiness import UserSkill, load_catalog, quick_match_percentage, score_skill_gap
from readiness.roadmap import generate_roadmap
from readiness.utils import logger


def main():
    parser = argparse.ArgumentParser(description="Skill-gap analysis for one role")
    parser.add_argument("--catalog", required=True, help="Catalog YAML file")
    parser.add_argument("--role", required=True, help="Role id")
    parser.add_argument("--skills", required=True, help="JSON file with the learner's skills")
    parser.add_argument("--roadmap", action="store_true", help="Include a generated roadmap")
    args = parser.parse_args()

    catalog = load_catalog(args.catalog)
    role = catalog.get_role(args.role)
    if role is None:
        logger.error(f"Unknown role: {args.role}")
        sys.exit(1)

    with open(args.skills, 'r') as f:
        inventory = [UserSkill.model_validate(s) for s in json.load(f)]

    analysis = score_skill_gap(inventory, role, catalog.skill_index())
    output = {
        "role": role.title,
        "quick_match": quick_match_percentage(inventory, role),
        "analysis": analysis.model_dump(mode="json"),
    }
    if args.roadmap:
        output["roadmap"] = [
            item.model_dump(mode="json") for item in generate_roadmap(analysis, catalog.resources)
        ]

    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
