"""PrintFlow infrastructure: adapters, stubs and observability."""
