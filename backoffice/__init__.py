"""Role-based access control service for the point-of-sale back office."""
