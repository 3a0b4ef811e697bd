"""Runtime context and structured logging shared by commands."""
