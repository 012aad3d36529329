"""Domain layer: one package per calculator plus shared primitives."""
