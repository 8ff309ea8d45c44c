"""Infrastructure — logging setup and mock registry loading."""
