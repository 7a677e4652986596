"""Social Auth Domain Layer."""
