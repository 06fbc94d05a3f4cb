#!/usr/bin/env python3
"""
Database seed data script for the User Groups Service.

Populates the database with Faker-generated users, a fixed set of groups
and random memberships. Groups and memberships go through GroupsService,
so the same preconditions apply as for any other caller.
"""

import sys
import random
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from faker import Faker

from usergroups.core.database import SessionLocal, create_tables
from usergroups.core.logging import configure_logging
from usergroups.models import User, Group, UserGroupRelation
from usergroups.services import GroupsService

# Initialize Faker
fake = Faker()
Faker.seed(42)  # For reproducible data
random.seed(42)

GROUP_TEMPLATES = [
    {"name": "Administrators", "permissions": ["READ", "WRITE", "DELETE", "SHARE", "UPLOAD_FILES"]},
    {"name": "Editors", "permissions": ["READ", "WRITE", "SHARE"]},
    {"name": "Uploaders", "permissions": ["READ", "UPLOAD_FILES"]},
    {"name": "Reviewers", "permissions": ["READ", "SHARE"]},
    {"name": "Guests", "permissions": ["READ"]},
]


class DataSeeder:
    """Class to handle database seeding operations."""

    def __init__(self):
        self.groups_service = GroupsService(SessionLocal)
        self.user_ids: List[int] = []
        self.group_ids: List[int] = []

    def clear_existing_data(self):
        """Clear all existing data from tables."""
        print("🧹 Clearing existing data...")

        # Delete in reverse order of dependencies
        with SessionLocal.begin() as db:
            db.query(UserGroupRelation).delete()
            db.query(Group).delete()
            db.query(User).delete()

        print("✅ Existing data cleared")

    def create_users(self, count: int = 30):
        """Create users directly; the groups service never writes users."""
        print(f"👤 Creating {count} users...")

        with SessionLocal() as db:
            users = [
                User(login=fake.unique.user_name(), age=random.randint(4, 130))
                for _ in range(count)
            ]
            db.add_all(users)
            db.commit()
            self.user_ids = [user.id for user in users]

        print(f"✅ Created {len(self.user_ids)} users")

    def create_groups(self):
        """Create groups through the service."""
        print(f"👥 Creating {len(GROUP_TEMPLATES)} groups...")

        for template in GROUP_TEMPLATES:
            result = self.groups_service.add(template)
            if result.success:
                self.group_ids.append(result.data["id"])
            else:
                print(f"⚠️  Skipped group '{template['name']}': {result.message}")

        print(f"✅ Created {len(self.group_ids)} groups")

    def create_memberships(self, max_groups_per_user: int = 3):
        """Put every user into a few random groups."""
        print("🔗 Creating group memberships...")

        added = 0
        for user_id in self.user_ids:
            picks = random.sample(self.group_ids, k=random.randint(0, min(max_groups_per_user, len(self.group_ids))))
            for group_id in picks:
                if self.groups_service.add_user_to_group(user_id, group_id).success:
                    added += 1

        print(f"✅ Created {added} memberships")


def main():
    """Main seeding function."""
    configure_logging("WARNING")
    print("🌱 Seeding database")
    print("=" * 40)

    create_tables()

    seeder = DataSeeder()
    if "--clear" in sys.argv:
        seeder.clear_existing_data()

    seeder.create_users()
    seeder.create_groups()
    seeder.create_memberships()

    print()
    print("✅ Seeding completed")


if __name__ == "__main__":
    main()
