"""Infrastructure: Redis cache and the SQL tenant directory."""
