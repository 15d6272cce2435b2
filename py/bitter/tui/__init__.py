"""bitter-tui: Interactive bitfield inspector."""
