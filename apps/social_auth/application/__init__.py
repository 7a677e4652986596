"""Social Auth Application Layer."""
