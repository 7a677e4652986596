"""Social Auth Infrastructure Layer."""
