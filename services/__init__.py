"""Application services sitting between the hosts and the mappers."""
