"""Event plumbing and randomness shared by the dice tray."""
