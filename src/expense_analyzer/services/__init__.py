"""Services built on top of parsed statements."""
