"""HTTP and WebSocket surface for a single game session."""
