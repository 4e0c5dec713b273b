"""Writers persisting formatted text."""
