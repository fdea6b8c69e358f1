"""HTTP primitives — the request snapshot the gate reads."""
