"""Feature modules for QR Frame."""
