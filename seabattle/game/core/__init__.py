"""Board model, placement, attack resolution and session rules."""
