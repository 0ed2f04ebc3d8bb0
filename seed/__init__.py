"""Demo data seeding for the admin panel database."""

from seed.progress import with_progress_bar
from seed.seeder import DatabaseSeeder, SeedCounts

__all__ = ["DatabaseSeeder", "SeedCounts", "with_progress_bar"]
