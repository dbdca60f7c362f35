#!/usr/bin/env python3
"""Benchmark scoring, roadmap sync and job ranking on synthetic data"""
import argparse
import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from readiness import JobRole, RoleRequirement, UserSkill, rank_jobs, score_skill_gap
from readiness.roadmap import generate_roadmap, toggle_roadmap_item
from readiness.utils import monitor

LEVELS = ["beginner", "intermediate", "advanced"]


def build_fixture(num_skills, seed):
    rng = random.Random(seed)
    skill_ids = [f"skill-{i}" for i in range(num_skills)]

    role = JobRole(
        id="bench-role",
        title="Benchmark Role",
        required_skills=[RoleRequirement(skill_id=s, min_proficiency=rng.choice(LEVELS)) for s in skill_ids],
    )
    inventory = [
        UserSkill(id=s, name=s, proficiency=rng.choice(LEVELS))
        for s in rng.sample(skill_ids, num_skills // 2)
    ]
    now = datetime.now(timezone.utc)
    jobs = [
        {
            "job_id": f"job-{j}",
            "title": f"Engineer {j}",
            "company": "Bench Corp",
            "skills": rng.sample(skill_ids, min(8, num_skills)),
            "posted_date": (now - timedelta(days=rng.randint(0, 60))).isoformat(),
        }
        for j in range(200)
    ]
    return role, inventory, jobs


def benchmark(num_skills, iterations, seed):
    """Run each operation and report latency from the monitor"""
    role, inventory, jobs = build_fixture(num_skills, seed)
    monitor.reset()

    for _ in range(iterations):
        analysis = score_skill_gap(inventory, role)
        roadmap = generate_roadmap(analysis)
        progress_inventory = inventory
        for item in roadmap:
            result = toggle_roadmap_item(roadmap, item.id, progress_inventory, role=role)
            roadmap, progress_inventory = result.roadmap, result.inventory
        rank_jobs(jobs, inventory)

    return monitor.get_report()


def main():
    parser = argparse.ArgumentParser(description="Benchmark readiness engine operations")
    parser.add_argument("--skills", type=int, default=25, help="Required skills per role")
    parser.add_argument("--iterations", type=int, default=20, help="Iterations per operation")
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()

    print("=" * 70)
    print(f"READINESS ENGINE BENCHMARK ({args.skills} skills, {args.iterations} iterations)")
    print("=" * 70)

    report = benchmark(args.skills, args.iterations, args.seed)
    for name, stats in report.items():
        print(f"\n{name}")
        print(f"  Calls: {stats['calls']} (failures: {stats['failures']})")
        print(f"  Average: {stats['avg_latency_ms']:.3f} ms")
        print(f"  P95: {stats['p95_latency_ms']:.3f} ms")

    print("\n" + "=" * 70)


if __name__ == "__main__":
    main()
