"""Identity context: learners known to the application."""
