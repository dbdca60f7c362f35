#!/usr/bin/env python3
"""Rank job postings against a learner's skills"""
import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from readiness import UserSkill, rank_jobs
from readiness.utils import logger


def main():
    parser = argparse.ArgumentParser(description="Rank job postings by skill match")
    parser.add_argument("--jobs", required=True, help="JSON file with a list of job postings")
    parser.add_argument("--skills", required=True, help="JSON file with the learner's skills")
    parser.add_argument("--output", help="Output JSON file")
    args = parser.parse_args()

    with open(args.jobs, 'r') as f:
        jobs = json.load(f)
    with open(args.skills, 'r') as f:
        inventory = [UserSkill.model_validate(s) for s in json.load(f)]

    logger.info(f"Ranking {len(jobs)} jobs against {len(inventory)} skills")
    ranked = rank_jobs(jobs, inventory)
    output = [job.model_dump(mode="json") for job in ranked]

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(output, f, indent=2)
        logger.info(f"✓ Saved ranking to {args.output}")
    else:
        print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
