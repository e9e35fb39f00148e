"""PrintFlow application layer: ports and orchestration services."""
