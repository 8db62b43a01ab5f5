"""Small helpers shared by the schema variants and the checker."""
