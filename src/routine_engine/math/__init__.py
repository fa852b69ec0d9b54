"""Pure timing math for exercises and sessions."""
