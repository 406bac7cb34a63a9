"""HTTP layer: one router per resource plus app assembly in `main`."""
