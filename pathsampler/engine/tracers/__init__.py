"""Shape tracers. Each module registers one or more tracers via @tracer."""
