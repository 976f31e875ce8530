"""Infrastructure layer: HTTP transport and the authenticated API client."""
