"""Flask JSON API over the keypad Engine."""
