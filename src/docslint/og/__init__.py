"""Social preview card rendering for navigation pages."""
